"""Net balance computation for a workspace.

A positive balance means the member is owed money, a negative one means the
member owes money. Amounts are plain floats and are accumulated in insertion
order (expenses first, then each expense's shares) without any rounding.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional, Sequence

from .models import Expense, ExpenseShare, Member
from .store import Store

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def compute_net_balances(
    members: Iterable[Member],
    expenses: Iterable[Expense],
    shares_for: Callable[[int], Sequence[ExpenseShare]],
) -> Dict[int, Optional[float]]:
    """Return a mapping of member id to net balance.

    Parameters:
        members: Members of the workspace; each gets a starting balance of 0.
        expenses: Expenses of the workspace, in insertion order.
        shares_for: Callable returning the shares of an expense id.

    Returns:
        Dict keyed by member id. A payer or share member missing from
        ``members`` gets a key whose balance is None; it stays None no
        matter what is applied to it afterwards.
    """
    net: Dict[int, Optional[float]] = {m.id: 0 for m in members}

    def _apply(member_id: int, delta: float) -> None:
        if member_id not in net:
            logger.warning("Member %s is not part of the workspace member list", member_id)
            net[member_id] = None
        if net[member_id] is not None:
            net[member_id] += delta

    for exp in expenses:
        # The payer is credited the full amount they fronted
        _apply(exp.payer_member_id, exp.amount)
        for share in shares_for(exp.id):
            _apply(share.member_id, -share.share_amount)

    return net


# PUBLIC_INTERFACE
def settle_workspace(store: Store, workspace_id: int) -> Dict[int, Optional[float]]:
    """Read a workspace's members, expenses and shares and compute net balances."""
    members = store.list_members(workspace_id)
    expenses = store.list_expenses(workspace_id)
    return compute_net_balances(members, expenses, store.list_shares_for_expense)
