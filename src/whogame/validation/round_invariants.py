"""Round Consistency Validators (R.1-R.9).

Rules:
- R.1: Every impostor id must be on the roster
- R.2: Impostor count must match settings (all players only under Everyone Impostor)
- R.3: Jester, detective and healer must be distinct players
- R.4: Jester, detective and healer must not be impostors
- R.5: Jester, detective and healer must be on the roster
- R.6: Player.is_impostor must match the assignment (inverted under Roles Switched)
- R.7: Extra roles must match the resolved modes
- R.8: current_player_index must point at a roster seat
- R.9: Votes must reference roster players
"""

from typing import Optional

from whogame.models.modes import GameMode
from whogame.models.player import Player
from whogame.models.round_state import RoundPhase, RoundState
from .types import ValidationViolation, ValidationSeverity


def expected_impostor_flag(state: RoundState, player_id: str) -> bool:
    """Compute the is_impostor flag a player should carry for this round."""
    if state.normal_mode == GameMode.ROLES_SWITCHED:
        return (
            player_id not in state.impostor_ids
            and player_id not in state.extra_role_ids()
        )
    return player_id in state.impostor_ids


def validate_round_state(
    state: RoundState,
    players: list[Player],
    number_of_impostors: Optional[int] = None,
) -> list[ValidationViolation]:
    """Validate round consistency rules R.1-R.9.

    Args:
        state: Round state to audit
        players: Roster in display order, with round flags applied
        number_of_impostors: Configured impostor count, if known

    Returns:
        List of validation violations (empty if valid)
    """
    violations: list[ValidationViolation] = []
    roster_ids = [p.id for p in players]
    roster = set(roster_ids)

    if state.phase == RoundPhase.LOBBY:
        return _validate_lobby(state, players)

    # R.1: impostors ⊆ roster
    unknown = [pid for pid in state.impostor_ids if pid not in roster]
    if unknown:
        violations.append(ValidationViolation(
            rule_id="R.1",
            category="Role Assignment",
            message="Impostor ids must be on the roster",
            context={"unknown_ids": unknown},
        ))

    # R.2: impostor count
    impostor_count = len(set(state.impostor_ids))
    if state.normal_mode == GameMode.EVERYONE_IMPOSTOR:
        if impostor_count != len(roster):
            violations.append(ValidationViolation(
                rule_id="R.2",
                category="Role Assignment",
                message="Everyone Impostor must make every player an impostor",
                context={"impostors": impostor_count, "players": len(roster)},
            ))
    else:
        if impostor_count >= len(roster):
            violations.append(ValidationViolation(
                rule_id="R.2",
                category="Role Assignment",
                message="Impostor count must be smaller than the player count",
                context={"impostors": impostor_count, "players": len(roster)},
            ))
        elif number_of_impostors is not None and impostor_count != number_of_impostors:
            violations.append(ValidationViolation(
                rule_id="R.2",
                category="Role Assignment",
                message=f"Expected {number_of_impostors} impostor(s), got {impostor_count}",
                context={"impostors": impostor_count, "expected": number_of_impostors},
            ))

    extras = state.extra_role_ids()

    # R.3: extra roles pairwise distinct
    if len(set(extras)) != len(extras):
        violations.append(ValidationViolation(
            rule_id="R.3",
            category="Role Assignment",
            message="Jester, detective and healer must be different players",
            context={
                "jester": state.jester_id,
                "detective": state.detective_id,
                "healer": state.healer_id,
            },
        ))

    # R.4: extras ∩ impostors == ∅
    overlap = [pid for pid in extras if pid in state.impostor_ids]
    if overlap:
        violations.append(ValidationViolation(
            rule_id="R.4",
            category="Role Assignment",
            message="Jester, detective and healer cannot be impostors",
            context={"overlapping_ids": overlap},
        ))

    # R.5: extras ⊆ roster
    unknown_extras = [pid for pid in extras if pid not in roster]
    if unknown_extras:
        violations.append(ValidationViolation(
            rule_id="R.5",
            category="Role Assignment",
            message="Extra role holders must be on the roster",
            context={"unknown_ids": unknown_extras},
        ))

    # R.6: is_impostor flags
    mismatched = [
        p.id for p in players
        if bool(p.is_impostor) != expected_impostor_flag(state, p.id)
    ]
    if mismatched:
        violations.append(ValidationViolation(
            rule_id="R.6",
            category="Player Flags",
            message="Player.is_impostor does not match the round assignment",
            context={"mismatched_ids": mismatched},
        ))

    # R.7: roles match modes
    violations.extend(_validate_roles_match_modes(state))

    # R.8: current seat in range
    if not 0 <= state.current_player_index < len(players):
        violations.append(ValidationViolation(
            rule_id="R.8",
            category="Lifecycle",
            message=f"current_player_index {state.current_player_index} is out of range",
            context={"players": len(players)},
        ))

    # R.9: votes reference roster players
    bad_votes = {
        voter: target for voter, target in state.votes.items()
        if voter not in roster or target not in roster
    }
    if bad_votes:
        violations.append(ValidationViolation(
            rule_id="R.9",
            category="Voting",
            message="Votes must reference roster players",
            context={"votes": bad_votes},
        ))

    return violations


def _validate_roles_match_modes(state: RoundState) -> list[ValidationViolation]:
    violations: list[ValidationViolation] = []
    checks = [
        ("jester", state.jester_id, state.normal_mode == GameMode.JESTER),
        ("detective", state.detective_id, state.normal_mode == GameMode.DETECTIVE),
        ("healer", state.healer_id, state.special_mode == GameMode.BREAKING_POINT),
    ]
    for role_name, holder, allowed in checks:
        if holder is not None and not allowed:
            violations.append(ValidationViolation(
                rule_id="R.7",
                category="Role Assignment",
                message=f"A {role_name} was assigned but its mode is not active",
                context={
                    "normal_mode": state.normal_mode,
                    "special_mode": state.special_mode,
                },
            ))

    if state.special_mode is not None and state.active_mode != state.special_mode:
        violations.append(ValidationViolation(
            rule_id="R.7",
            category="Mode Resolution",
            message="The special mode must be the active mode",
            context={"active_mode": state.active_mode, "special_mode": state.special_mode},
        ))
    if state.special_mode is None and state.active_mode != state.normal_mode:
        violations.append(ValidationViolation(
            rule_id="R.7",
            category="Mode Resolution",
            message="Without a special mode the normal mode must be active",
            context={"active_mode": state.active_mode, "normal_mode": state.normal_mode},
        ))
    return violations


def _validate_lobby(state: RoundState, players: list[Player]) -> list[ValidationViolation]:
    violations: list[ValidationViolation] = []
    if state != RoundState():
        violations.append(ValidationViolation(
            rule_id="R.8",
            category="Lifecycle",
            message="Lobby state must hold no round data",
            severity=ValidationSeverity.WARNING,
        ))
    flagged = [p.id for p in players if p.is_impostor is not None]
    if flagged:
        violations.append(ValidationViolation(
            rule_id="R.6",
            category="Player Flags",
            message="Round flags must be cleared in the lobby",
            context={"flagged_ids": flagged},
        ))
    return violations


__all__ = ['validate_round_state', 'expected_impostor_flag']
