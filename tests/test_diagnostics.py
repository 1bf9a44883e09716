import pytest

from lspkit.diagnostics import (
    CodeActionKind,
    DiagnosticCodeDescription,
    DiagnosticSeverity,
    DiagnosticTag,
    MessageActionItem,
    MessageParams,
    MessageType,
    ShowMessageRequestParams,
)


@pytest.mark.parametrize(
    "wire, member",
    [(1, DiagnosticSeverity.ERROR), (2, DiagnosticSeverity.WARNING),
     (3, DiagnosticSeverity.INFORMATION), (4, DiagnosticSeverity.HINT)],
)
def test_severity_from_wire(wire, member):
    assert DiagnosticSeverity(wire) is member


def test_severity_rejects_unknown():
    with pytest.raises(ValueError):
        DiagnosticSeverity(5)


def test_tag_from_wire():
    assert DiagnosticTag(1) is DiagnosticTag.UNNECESSARY
    assert DiagnosticTag(2) is DiagnosticTag.DEPRECATED


def test_code_description_round_trip():
    desc = DiagnosticCodeDescription(href="https://example.com/E100")
    assert DiagnosticCodeDescription.from_dict(desc.to_dict()) == desc


@pytest.mark.parametrize(
    "wire, member",
    [("quickfix", CodeActionKind.QUICK_FIX),
     ("refactor.extract", CodeActionKind.REFACTOR_EXTRACT),
     ("source.organizeImports", CodeActionKind.SOURCE_ORGANIZE_IMPORTS)],
)
def test_code_action_kind_lookup(wire, member):
    assert CodeActionKind(wire) is member
    assert member == wire


def test_message_params_wire_form():
    params = MessageParams(MessageType.WARNING, "hi")
    assert params.to_dict() == {"type": 2, "message": "hi"}


def test_message_params_defaults():
    params = MessageParams.from_dict({})
    assert params.type is MessageType.ERROR
    assert params.message == ""


def test_message_params_rejects_bad_type():
    with pytest.raises(ValueError):
        MessageParams.from_dict({"type": 9, "message": "x"})


def test_action_item_round_trip():
    item = MessageActionItem("Retry")
    assert MessageActionItem.from_dict(item.to_dict()) == item


def test_show_message_request_round_trip():
    params = ShowMessageRequestParams(
        type=MessageType.INFO,
        message="Reload?",
        actions=[MessageActionItem("Yes"), MessageActionItem("No")],
    )
    data = params.to_dict()
    assert [a["title"] for a in data["actions"]] == ["Yes", "No"]
    restored = ShowMessageRequestParams.from_dict(data)
    assert restored == params
    assert restored.type is MessageType.INFO


def test_show_message_request_independent_action_lists():
    first = ShowMessageRequestParams()
    second = ShowMessageRequestParams()
    first.actions.append(MessageActionItem("Open Log"))
    assert second.actions == []