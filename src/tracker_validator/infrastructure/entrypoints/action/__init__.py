from .action_runner import ActionRunner, run_action

__all__ = ["ActionRunner", "run_action"]
