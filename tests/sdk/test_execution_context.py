import pytest

from httpapis import ContextInactiveError, ExecutionContext


class TestExecutionContext:
    def test_active_until_deactivated(self):
        context = ExecutionContext()
        assert context.is_active is True

        context.deactivate()

        assert context.is_active is False
        with pytest.raises(ContextInactiveError, match="context inactive"):
            context.ensure_active()

    def test_liveness_predicate(self):
        alive = [True]
        context = ExecutionContext(is_alive=lambda: alive[0])
        context.ensure_active()

        alive[0] = False

        assert context.is_active is False

    def test_deactivate_wins_over_predicate(self):
        context = ExecutionContext(is_alive=lambda: True)
        context.deactivate()

        assert context.is_active is False
