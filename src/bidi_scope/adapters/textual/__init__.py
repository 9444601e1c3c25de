"""Textual host adapter; ``app`` is imported lazily since it needs textual."""

from .controller import BufferEntered, HintController, HintHooks, UPDATE_EVENTS

__all__ = ["BufferEntered", "HintController", "HintHooks", "UPDATE_EVENTS"]
