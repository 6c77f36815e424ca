from dataclasses import dataclass
from typing import Dict, List, Optional

from app.config.action_sets import ACTION_SETS, CONTENT_TYPE_RULES

ActionSet = List[Dict[str, str]]

_LOWERCASE_INDEX = {name.lower(): name for name in ACTION_SETS}


@dataclass
class ActionRotation:
    actions: ActionSet
    index: int
    next_index: int
    total: int

    @property
    def next_action_set(self) -> Optional[int]:
        """Offset the client should request next; None once the rotation wraps"""
        if self.total > 1 and self.next_index != 0:
            return self.next_index
        return None

    @property
    def exhausted(self) -> bool:
        return self.total > 1 and self.next_index == 0


def resolve_content_type(content_type: str) -> str:
    """Map a free-form classification onto a catalog key"""
    lowered = (content_type or "").strip().lower()
    if lowered in _LOWERCASE_INDEX:
        return _LOWERCASE_INDEX[lowered]

    for keywords, name in CONTENT_TYPE_RULES:
        if any(keyword in lowered for keyword in keywords):
            if name == "YouTube video":
                if "sitcom" in lowered:
                    return "YouTube sitcom"
                if "movie" in lowered:
                    return "YouTube movie"
            return name
    return "default"


def resolve_action_sets(content_type: str) -> List[ActionSet]:
    return ACTION_SETS[resolve_content_type(content_type)]


def select_action_set(action_sets: List[ActionSet], offset: int) -> ActionRotation:
    total = len(action_sets)
    # Negative offsets restart the rotation
    index = offset % total if offset >= 0 else 0
    return ActionRotation(
        actions=action_sets[index],
        index=index,
        next_index=(index + 1) % total,
        total=total,
    )
