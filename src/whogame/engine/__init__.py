"""Engine package - round setup and lifecycle components."""

from .mode_resolver import ResolvedModes, resolve_modes
from .role_assigner import RoleAssignment, assign_roles, check_role_preconditions
from .content_selector import RoundContent, select_content
from .round_lifecycle import (
    RoundStart,
    start_game,
    mark_card_viewed,
    advance,
    cast_vote,
    end_game,
    reset_game,
)
from .views import (
    CardView,
    RoundResults,
    VoteCount,
    build_card_view,
    build_results,
    tally_votes,
)
from .discussion_timer import DiscussionTimer
from .session import GameSession

__all__ = [
    "ResolvedModes",
    "resolve_modes",
    "RoleAssignment",
    "assign_roles",
    "check_role_preconditions",
    "RoundContent",
    "select_content",
    "RoundStart",
    "start_game",
    "mark_card_viewed",
    "advance",
    "cast_vote",
    "end_game",
    "reset_game",
    "CardView",
    "RoundResults",
    "VoteCount",
    "build_card_view",
    "build_results",
    "tally_votes",
    "DiscussionTimer",
    "GameSession",
]
