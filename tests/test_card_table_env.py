"""
CardTableEnv tests: the deal/check event flow and the rendered table.
"""

import os

import numpy as np
import pytest

from cardgame.core.game_components.card import Card
from cardgame.core.game_components.hand import Hand
from cardgame.core.utils.spaces import DiscreteSpace
from cardgame.envs.card_table_env import CardTableEnv, HandReport, TableView


@pytest.fixture
def env():
    return CardTableEnv(seed=42)


class TestCardTableEnv:

    def test_reset_deals_first_hand(self, env):
        view, info = env.reset()
        assert isinstance(view, TableView)
        assert len(view.cards) == 5
        assert len(set(view.cards)) == 5
        assert view.check is None
        assert view.deals == 1
        assert view.image_paths == ()
        assert info["action"] == "reset"
        assert isinstance(info["hand"], Hand)

    def test_action_space(self, env):
        assert env.action_space == DiscreteSpace(2)

    def test_check_reports_hand_queries(self, env):
        view, info = env.step(CardTableEnv.ACTION_CHECK)
        hand = info["hand"]
        assert info["action"] == "check"
        assert view.check == HandReport(
            sum=hand.get_sum(),
            suits=hand.get_suits("H"),
            flush=hand.check_flush(5),
            has_watched_card=hand.contains_card("S", 12),
        )

    def test_deal_keeps_last_report(self, env):
        checked, _ = env.step(CardTableEnv.ACTION_CHECK)
        dealt, info = env.step(CardTableEnv.ACTION_DEAL)
        assert info["action"] == "deal"
        assert dealt.deals == 2
        assert dealt.check == checked.check
        assert dealt.cards == tuple(card.code for card in info["hand"])

    def test_reset_clears_report(self, env):
        env.step(CardTableEnv.ACTION_CHECK)
        env.step(CardTableEnv.ACTION_DEAL)
        view, _ = env.reset()
        assert view.check is None
        assert view.deals == 1

    def test_views_are_immutable(self, env):
        view, _ = env.reset()
        with pytest.raises(AttributeError):
            view.deals = 10

    def test_same_seed_same_hands(self):
        first, _ = CardTableEnv(seed=3).step(CardTableEnv.ACTION_DEAL)
        second, _ = CardTableEnv(seed=3).step(CardTableEnv.ACTION_DEAL)
        assert first.cards == second.cards

    def test_reset_with_seed_is_reproducible(self, env):
        first, _ = env.reset(seed=11)
        second, _ = env.reset(seed=11)
        assert first.cards == second.cards

    @pytest.mark.parametrize("action", [-1, 2, "deal", None, True])
    def test_invalid_action(self, env, action):
        with pytest.raises(ValueError):
            env.step(action)

    def test_image_paths(self):
        env = CardTableEnv(assets_dir="images", seed=1)
        view, _ = env.reset()
        assert view.image_paths == tuple(os.path.join("images", f"{code}.png") for code in view.cards)

    def test_custom_configuration(self):
        env = CardTableEnv(hand_size=52, flush_size=13, watched_card=Card("H", 1), listed_suit="C", seed=5)
        view, _ = env.step(CardTableEnv.ACTION_CHECK)
        assert len(view.cards) == 52
        assert view.check.sum == 4 * sum(range(1, 14))
        assert view.check.flush is True
        assert view.check.has_watched_card is True
        assert view.check.suits == " ".join(f"{face}C" for face in range(1, 14))

    def test_empty_hand(self):
        env = CardTableEnv(hand_size=0, seed=5)
        view, _ = env.step(CardTableEnv.ACTION_CHECK)
        assert view.cards == ()
        assert view.check == HandReport(sum=0, suits="No hearts", flush=False, has_watched_card=False)

    @pytest.mark.parametrize("kwargs", [
        {"hand_size": 53},
        {"hand_size": -1},
        {"flush_size": 60},
        {"hand_size": 2.0},
        {"watched_card": ("X", 12)},
        {"watched_card": None},
        {"watched_card": ("S",)},
        {"watched_card": ("S", 12, 1)},
        {"watched_card": "12S"},
        {"listed_suit": "Q"},
        {"render_mode": "rgb_array"},
    ])
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(ValueError):
            CardTableEnv(**kwargs)

    def test_numpy_integer_sizes(self):
        env = CardTableEnv(hand_size=np.int64(3), flush_size=np.int32(2), seed=5)
        view, _ = env.reset()
        assert len(view.cards) == 3
        assert env.hand_size == 3
        assert env.flush_size == 2


class TestRendering:

    def test_no_render_mode(self, env):
        assert env.render() is None

    def test_ansi_before_check(self):
        env = CardTableEnv(render_mode="ansi", seed=8)
        text = env.render()
        assert "Hand: " + " ".join(env.hand.cards[i].code for i in range(5)) in text
        assert "Sum:" not in text

    def test_ansi_after_check(self, capsys):
        env = CardTableEnv(render_mode="ansi", seed=8)
        env.step(CardTableEnv.ACTION_CHECK)
        printed = capsys.readouterr().out
        text = env.render()
        assert text in printed
        assert f"Sum: {env.hand.get_sum()}" in text
        assert f"Hearts: {env.hand.get_suits('H')}" in text
        assert f"Flush: {'Yes' if env.hand.check_flush(5) else 'No'}" in text
        assert f"Queen of Spades: {'Yes' if env.hand.contains_card('S', 12) else 'No'}" in text

    def test_human_prints(self, capsys):
        env = CardTableEnv(render_mode="human", seed=8)
        capsys.readouterr()
        assert env.render() is None
        assert "Card Table" in capsys.readouterr().out
