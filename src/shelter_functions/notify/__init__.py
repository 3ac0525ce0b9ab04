from .background import BackgroundTasks
from .build_hook import BuildHookNotifier, BuildNotifier, NullNotifier, build_notifier

__all__ = [
    "BackgroundTasks",
    "BuildNotifier",
    "BuildHookNotifier",
    "NullNotifier",
    "build_notifier",
]
