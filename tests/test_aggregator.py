from __future__ import annotations

import pytest

from radar_core.aggregator import BlockStat, aggregate
from radar_core.normalizer import normalize_all
from radar_core.weights import item_weight, weight

from tests.conftest import make_dilemma, make_question


def _acc(questions, dilemmas, answers, level="Common"):
    return aggregate(normalize_all(questions, dilemmas, answers), level)


@pytest.mark.parametrize(
    "level,horizon,expected",
    [
        ("L1", 0, 1.5),
        ("L1", 1, 1.5),
        ("L1", 2, 1.0),
        ("L2", 1, 1.25),
        ("L2", 2, 1.25),
        ("L2", 0, 1.0),
        ("L3", 2, 1.5),
        ("L3", 3, 1.5),
        ("L3", 4, 1.0),
        ("L4", 3, 1.0),
        ("Common", 0, 1.0),
        ("L1", None, 1.0),
    ],
)
def test_weight_table(level, horizon, expected):
    assert weight(level, horizon) == expected


def test_dilemmas_always_weigh_one():
    assert item_weight("L1", "dilemma", 0) == 1.0
    assert item_weight("L1", "question", 0) == 1.5


def test_both_axis_adds_full_value_to_each_axis():
    acc = _acc([make_question(1, axis="Both")], [], {1: 4})
    assert (acc.axes["People"].sum, acc.axes["People"].count) == (4, 1)
    assert (acc.axes["Results"].sum, acc.axes["Results"].count) == (4, 1)


def test_single_axis_only_touches_its_accumulator():
    acc = _acc([make_question(1, axis="Results")], [], {1: 2})
    assert acc.axes["People"].count == 0
    assert acc.axes["Results"].sum == 2


def test_global_weighted_sum_and_max():
    questions = [make_question(1, horizon=0), make_question(2, horizon=2)]
    acc = _acc(questions, [make_dilemma("D1", horizon=0)], {1: 5, 2: 1, "D1": 3}, level="L1")
    assert acc.weighted_sum == pytest.approx(5 * 1.5 + 1 * 1.0 + 3 * 1.0)
    assert acc.max_sum == pytest.approx(5 * 1.5 + 5 * 1.0 + 5 * 1.0)


def test_multi_tag_question_fans_out_to_roles_horizons_and_categories():
    q = make_question(
        1,
        categories=["Vision", "Influence"],
        roles=["Strategist", "Leader"],
        horizons=[2, 3],
        block="Strategy",
    )
    acc = _acc([q], [], {1: 4})

    for role in ("Strategist", "Leader"):
        stat = acc.roles[role]
        assert (stat.sum, stat.count) == (4, 1)
        assert stat.horizons[2].count == 1 and stat.horizons[3].count == 1
        assert stat.horizons[0].count == 0
    assert acc.roles["Manager"].count == 0
    assert acc.horizons[2].sum == 4 and acc.horizons[3].sum == 4
    assert acc.categories["Vision"].count == 1 and acc.categories["Influence"].count == 1
    assert acc.category_values == {"Vision": [4], "Influence": [4]}

    # block counted once per item, horizons tallied per tag
    block = acc.blocks["Strategy"]
    assert (block.sum, block.count) == (4, 1)
    assert block.horizon_freq == {2: 1, 3: 1}


def test_empty_tag_lists_are_no_ops_for_that_dimension():
    q = make_question(1, categories=[], roles=[], horizons=[])
    acc = _acc([q], [], {1: 5})
    assert acc.categories == {}
    assert all(stat.count == 0 for stat in acc.roles.values())
    assert all(stat.count == 0 for stat in acc.horizons.values())
    # axis and global still see the item
    assert acc.axes["People"].count == 1
    assert acc.max_sum == 5


def test_unknown_role_is_ignored_and_new_category_is_created():
    q = make_question(1, role="Visionary", category="Brand New")
    acc = _acc([q], [], {1: 3})
    assert "Visionary" not in acc.roles
    assert acc.categories["Brand New"].sum == 3


def test_dilemma_feeds_both_roles_and_the_situational_accumulator():
    d = make_dilemma("D1", role="Manager", secondary_role="Leader", horizon=1, category="Delegation")
    acc = _acc([], [d], {"D1": 5})
    for role in ("Manager", "Leader"):
        assert acc.roles[role].sum == 5
        assert acc.roles[role].horizons[1].count == 1
        assert acc.dilemma_roles[role].count == 1
    assert acc.dilemma_roles["Strategist"].count == 0
    assert acc.category_values["Delegation"] == [5]


def test_questions_do_not_feed_the_situational_accumulator():
    acc = _acc([make_question(1, role="Leader")], [], {1: 5})
    assert acc.dilemma_roles["Leader"].count == 0


def test_omitted_items_only_reach_the_omission_list():
    acc = _acc([make_question(1)], [make_dilemma("D1")], {1: None, "D1": None})
    assert [i.item_id for i in acc.omitted] == [1, "D1"]
    assert acc.max_sum == 0
    assert acc.scored == 0
    assert acc.categories == {}


def test_block_dominant_horizon_is_plurality_with_lowest_index_on_ties():
    block = BlockStat(horizon_freq={3: 2, 1: 2, 4: 1})
    assert block.dominant_horizon() == 1
    assert BlockStat().dominant_horizon() == 0
