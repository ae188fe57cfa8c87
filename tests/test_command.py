"""Tests for RelayCommand."""

from customerapp.viewmodel.command import RelayCommand


class TestRelayCommand:
    def test_enabled_without_predicate(self):
        calls = []
        command = RelayCommand(lambda: calls.append("run"))

        assert command.can_execute() is True
        assert command.execute() is True
        assert calls == ["run"]

    def test_predicate_blocks_execution(self):
        calls = []
        command = RelayCommand(lambda: calls.append("run"), lambda: False)

        assert command.execute() is False
        assert calls == []

    def test_parameter_is_passed_when_accepted(self):
        received = []
        command = RelayCommand(received.append, lambda p: p != "no", accepts_parameter=True)

        command.execute("yes")
        command.execute("no")

        assert received == ["yes"]

    def test_parameter_ignored_for_parameterless_effect(self):
        calls = []
        command = RelayCommand(lambda: calls.append("run"))
        command.execute("ignored")
        assert calls == ["run"]

    def test_raise_can_execute_changed(self):
        command = RelayCommand(lambda: None)
        fired = []
        command.can_execute_changed.connect(lambda: fired.append(True))

        command.raise_can_execute_changed()

        assert fired == [True]
