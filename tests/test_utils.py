"""Tests for utility modules."""

from scriptlex.utils import get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "scriptlex.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("scriptlex.lexer.core").name == "scriptlex.lexer.core"
        assert get_logger("scriptlex").name == "scriptlex"

    def test_does_not_add_handlers(self) -> None:
        assert get_logger("scriptlex.decoding").handlers == []
