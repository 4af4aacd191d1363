from __future__ import annotations

from splitbook import services
from splitbook.models import Expense, ExpenseShare, Member
from splitbook.settlement import compute_net_balances, settle_workspace


def _member(member_id):
    return Member(id=member_id, name=f"m{member_id}", workspace_id=1)


def _shares(mapping):
    return lambda expense_id: mapping.get(expense_id, [])


def test_members_without_expenses_have_zero_balance():
    net = compute_net_balances([_member(1), _member(2)], [], _shares({}))
    assert net == {1: 0, 2: 0}


def test_empty_workspace_yields_empty_mapping():
    assert compute_net_balances([], [], _shares({})) == {}


def test_payer_covering_own_share_nets_to_zero():
    expense = Expense(id=10, title="Taxi", amount=42.5, payer_member_id=1, workspace_id=1)
    shares = {10: [ExpenseShare(expense_id=10, member_id=1, share_amount=42.5)]}
    assert compute_net_balances([_member(1)], [expense], _shares(shares)) == {1: 0}


def test_even_split_credits_payer_and_debits_other():
    expense = Expense(id=10, title="Dinner", amount=100.0, payer_member_id=1, workspace_id=1)
    shares = {
        10: [
            ExpenseShare(expense_id=10, member_id=1, share_amount=50.0),
            ExpenseShare(expense_id=10, member_id=2, share_amount=50.0),
        ]
    }
    net = compute_net_balances([_member(1), _member(2)], [expense], _shares(shares))
    assert net == {1: 50.0, 2: -50.0}


def test_multiple_expenses_accumulate():
    expenses = [
        Expense(id=1, title="Hotel", amount=90.0, payer_member_id=1, workspace_id=1),
        Expense(id=2, title="Fuel", amount=30.0, payer_member_id=2, workspace_id=1),
    ]
    shares = {
        1: [ExpenseShare(expense_id=1, member_id=m, share_amount=30.0) for m in (1, 2, 3)],
        2: [ExpenseShare(expense_id=2, member_id=m, share_amount=10.0) for m in (1, 2, 3)],
    }
    net = compute_net_balances([_member(1), _member(2), _member(3)], expenses, _shares(shares))
    assert net == {1: 50.0, 2: -10.0, 3: -40.0}


def test_payer_outside_member_list_has_undefined_balance():
    expenses = [
        Expense(id=5, title="Gift", amount=20.0, payer_member_id=99, workspace_id=1),
        Expense(id=6, title="Cake", amount=8.0, payer_member_id=99, workspace_id=1),
    ]
    shares = {
        5: [ExpenseShare(expense_id=5, member_id=1, share_amount=20.0)],
        6: [ExpenseShare(expense_id=6, member_id=1, share_amount=8.0)],
    }
    net = compute_net_balances([_member(1)], expenses, _shares(shares))
    assert net == {1: -28.0, 99: None}


def test_share_member_outside_member_list_has_undefined_balance():
    expense = Expense(id=5, title="Gift", amount=20.0, payer_member_id=1, workspace_id=1)
    shares = {5: [ExpenseShare(expense_id=5, member_id=42, share_amount=20.0)]}
    net = compute_net_balances([_member(1)], [expense], _shares(shares))
    assert net == {1: 20.0, 42: None}


def test_no_rounding_is_applied():
    expense = Expense(id=1, title="Snacks", amount=0.3, payer_member_id=1, workspace_id=1)
    shares = {
        1: [
            ExpenseShare(expense_id=1, member_id=2, share_amount=0.1),
            ExpenseShare(expense_id=1, member_id=2, share_amount=0.2),
        ]
    }
    net = compute_net_balances([_member(1), _member(2)], [expense], _shares(shares))
    assert net[1] == 0.3
    assert net[2] == 0 - 0.1 - 0.2


def test_settle_workspace_reads_from_store(store):
    user = services.register_user(store, "Ana", "ana@example.com", "pw")
    payer = services.create_member(store, "Ana", user.workspace_id)
    other = services.create_member(store, "Ben", user.workspace_id)
    services.create_expense(
        store,
        "Dinner",
        100.0,
        payer.id,
        user.workspace_id,
        [
            {"member_id": payer.id, "share_amount": 50.0},
            {"member_id": other.id, "share_amount": 50.0},
        ],
    )

    assert settle_workspace(store, user.workspace_id) == {payer.id: 50.0, other.id: -50.0}


def test_settle_workspace_ignores_other_workspaces(store):
    first = services.register_user(store, "Ana", "ana@example.com", "pw")
    second = services.register_user(store, "Ben", "ben@example.com", "pw")
    member = services.create_member(store, "Cleo", first.workspace_id)
    outsider = services.create_member(store, "Dan", second.workspace_id)
    services.create_expense(
        store,
        "Lunch",
        12.0,
        outsider.id,
        second.workspace_id,
        [{"member_id": outsider.id, "share_amount": 12.0}],
    )

    assert settle_workspace(store, first.workspace_id) == {member.id: 0}
