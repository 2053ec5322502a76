"""Virtual proxy: an image is only loaded when it is first drawn."""

import sys
from abc import ABC, abstractmethod


def _emit(out, text):
    print(text, file=out if out is not None else sys.stdout)


class ImageInterface(ABC):
    """Something that can be drawn and has an id."""

    @abstractmethod
    def draw(self):
        """Draw the image."""

    @property
    @abstractmethod
    def image_id(self):
        """The image's id."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    @abstractmethod
    def release(self):
        """Free whatever the image holds."""


class RealImage(ImageInterface):
    """An image that is loaded as soon as it is created."""

    def __init__(self, filename, image_id, out=None):
        self.filename = filename
        self._id = image_id
        self.out = out
        self.released = False
        _emit(out, "RealImage()")

    @property
    def image_id(self):
        return self._id

    def draw(self):
        _emit(self.out, f"drawing image-{self.image_id}")

    def release(self):
        if not self.released:
            self.released = True
            _emit(self.out, "~RealImage()")


class ProxyImage(ImageInterface):
    """Stands in for a real image and loads it on first draw."""

    def __init__(self, filename, image_id, out=None):
        self.filename = filename
        self._id = image_id
        self.out = out
        self._image = None

    @property
    def loaded(self):
        return self._image is not None

    def _real(self):
        if self._image is None:
            self._image = RealImage(self.filename, self._id, self.out)
        return self._image

    @property
    def image_id(self):
        if self._image is not None:
            return self._image.image_id
        return self._id

    def draw(self):
        self._real().draw()

    def release(self):
        """Drop the real image, if one was loaded."""
        if self._image is not None:
            image, self._image = self._image, None
            image.release()


def main(argv=None):
    """Draw images directly and through proxies."""
    print("=== Without Proxy ===")
    with RealImage("sample_file", 4) as image:
        image.draw()
    print()
    images = [RealImage("sample_file", number) for number in (1, 2, 3)]
    for image in images:
        image.draw()
    for image in images:
        image.release()

    print("\n=== With Proxy ===")
    with ProxyImage("sample_file", 3) as image:
        image.draw()
    print()
    proxies = [ProxyImage("sample_file", number) for number in (1, 2, 3)]
    for proxy in proxies:
        proxy.draw()
    for proxy in proxies:
        proxy.release()
    return 0


if __name__ == "__main__":
    sys.exit(main())