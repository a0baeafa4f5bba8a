"""Action entities."""

from pathviz.domain.actions.entities.action import Action, ActionGroup

__all__ = ["Action", "ActionGroup"]
