import io

import pytest

from sysdemos.command import (
    CloseCommand,
    CommandInvoker,
    CopyCommand,
    Document,
    GraphicDocument,
    MacroCommand,
    OpenCommand,
    PasteCommand,
    SimpleCommand,
    TextDocument,
    Zoom,
    main,
)


@pytest.mark.parametrize(
    "command_class, operation",
    [
        (OpenCommand, "open"),
        (CloseCommand, "close"),
        (CopyCommand, "copy"),
        (PasteCommand, "paste"),
    ],
)
def test_document_commands_reach_text_document(command_class, operation):
    out = io.StringIO()
    result = command_class(TextDocument(out)).execute()
    assert result == f"Text Document {operation} operation"
    assert out.getvalue() == result + "\n"


def test_graphic_document_open():
    out = io.StringIO()
    assert OpenCommand(GraphicDocument(out)).execute() == "Graphic Document open operation"


def test_document_is_abstract():
    with pytest.raises(TypeError):
        Document()


def test_simple_command_runs_zoom_actions():
    out = io.StringIO()
    zoom = Zoom(out)
    assert SimpleCommand(zoom, Zoom.zoom_in).execute() == "Zoom In"
    assert SimpleCommand(zoom, Zoom.zoom_out).execute() == "Zoom Out"
    assert out.getvalue().splitlines() == ["Zoom In", "Zoom Out"]


def test_simple_command_with_any_receiver():
    calls = []
    command = SimpleCommand(calls, list.clear)
    calls.append("x")
    command.execute()
    assert calls == []


def test_macro_runs_in_order():
    out = io.StringIO()
    doc = TextDocument(out)
    macro = MacroCommand()
    macro.add(CopyCommand(doc))
    macro.add(PasteCommand(doc))
    results = macro.execute()
    assert results == ["Text Document copy operation", "Text Document paste operation"]
    assert out.getvalue().splitlines() == results


def test_macro_remove_drops_every_occurrence():
    doc = TextDocument(io.StringIO())
    copy_command = CopyCommand(doc)
    paste_command = PasteCommand(doc)
    macro = MacroCommand([copy_command, paste_command, copy_command])
    macro.remove(copy_command)
    assert macro.commands == (paste_command,)


def test_macro_remove_absent_is_ignored():
    doc = TextDocument(io.StringIO())
    copy_command = CopyCommand(doc)
    macro = MacroCommand([copy_command])
    macro.remove(PasteCommand(doc))
    assert macro.commands == (copy_command,)


def test_invoker_without_command_raises():
    with pytest.raises(RuntimeError):
        CommandInvoker().execute()


def test_invoker_switches_commands():
    doc = GraphicDocument(io.StringIO())
    invoker = CommandInvoker(OpenCommand(doc))
    first = invoker.execute()
    invoker.command = CloseCommand(doc)
    second = invoker.execute()
    assert (first, second) == (
        "Graphic Document open operation",
        "Graphic Document close operation",
    )


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()

    def session(kind):
        return [
            f"{kind} Document open operation",
            "Zoom In",
            "Zoom Out",
            f"{kind} Document copy operation",
            f"{kind} Document paste operation",
            f"{kind} Document close operation",
        ]

    expected = (
        ["=== For Text Document ==="]
        + session("Text")
        + ["", "=== For Graphic Document ==="]
        + session("Graphic")
    )
    assert lines == expected