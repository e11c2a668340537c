"""Document hook exports."""

from .hook_registry import HookCallback, HookContext, HookPosition, HookRegistry

__all__ = ["HookCallback", "HookContext", "HookPosition", "HookRegistry"]
