import random
import unittest

from pokebattle.core.card import Card
from pokebattle.core.match import (
    HAND_SIZE, POINTS_PER_WIN, REVEAL_PROMPT,
    Match, MatchState, Outcome, RevealMode, final_outcome, resolve_round,
)
from pokebattle.core.player import AutomatedPlayer, InteractivePlayer

from helpers import fixed_deck, scripted


class TestRoundRules(unittest.TestCase):
    def test_stronger_card_takes_the_round(self):
        self.assertIs(resolve_round(Card("Pikachu", 100), Card("Eevee", 60)), Outcome.PLAYER_ONE)
        self.assertIs(resolve_round(Card("Eevee", 60), Card("Pikachu", 100)), Outcome.PLAYER_TWO)

    def test_equal_damage_ties(self):
        self.assertIs(resolve_round(Card("Bulbasaur", 50), Card("Squirtle", 50)), Outcome.TIE)

    def test_final_outcome(self):
        self.assertIs(final_outcome(15, 10), Outcome.PLAYER_ONE)
        self.assertIs(final_outcome(0, 5), Outcome.PLAYER_TWO)
        self.assertIs(final_outcome(10, 10), Outcome.TIE)


class TestScriptedMatch(unittest.TestCase):
    """Both players always take their first card, over a deck in known order."""

    def _match(self, deck, mode=RevealMode.IMMEDIATE):
        self.out = []
        self.pauses = []
        read_one, _ = scripted(*["1"] * 10)
        read_two, _ = scripted(*["1"] * 10)
        return Match(
            InteractivePlayer("Ash", read=read_one, write=self.out.append),
            InteractivePlayer("Gary", read=read_two, write=self.out.append),
            mode=mode, deck=deck, write=self.out.append, pause=self.pauses.append,
        )

    def test_deal_alternates_players(self):
        m = self._match(fixed_deck(60, 50, 40, 30, 20, 10, 5))
        m.deal()
        self.assertEqual([c.strength for c in m.player_one.hand], [60, 40, 20])
        self.assertEqual([c.strength for c in m.player_two.hand], [50, 30, 10])
        self.assertEqual(m.deck.remaining(), 1)
        self.assertIs(m.state, MatchState.ROUND_IN_PROGRESS)

    def test_player_one_sweeps(self):
        m = self._match(fixed_deck(60, 50, 40, 30, 20, 10))
        result = m.play()
        self.assertEqual(result.rounds, 3)
        self.assertEqual((result.score_one, result.score_two), (15, 0))
        self.assertIs(result.outcome, Outcome.PLAYER_ONE)
        self.assertEqual(result.winner, "Ash")
        self.assertEqual(self.out[-3:], [
            "Game Over!",
            "Final Scores -> Ash: 15, Gary: 0",
            "Ash wins the game!",
        ])
        self.assertTrue(m.is_over())

    def test_round_output_order(self):
        m = self._match(fixed_deck(60, 50, 40, 30, 20, 10))
        m.deal()
        m.play_round()
        self.assertEqual(self.out[0], "Ash's hand: Mon0 (Damage: 60) Mon2 (Damage: 40) Mon4 (Damage: 20)")
        self.assertEqual(self.out[1], "=" * 44)
        self.assertEqual(self.out[-3:], [
            "Ash wins the round and gets 5 points.",
            "Scores -> Ash: 5, Gary: 0",
            "\n",
        ])
        self.assertEqual(self.pauses, [])

    def test_board_shows_log_before_the_round_is_added(self):
        m = self._match(fixed_deck(60, 50, 40, 30, 20, 10))
        m.deal()
        m.play_round()
        self.assertIn("Played Cards: ", self.out)
        self.out.clear()
        m.play_round()
        self.assertIn("Played Cards: Mon0 (Damage: 60) Mon1 (Damage: 50)", self.out)

    def test_all_ties(self):
        m = self._match(fixed_deck(*[50] * 6))
        result = m.play()
        self.assertIs(result.outcome, Outcome.TIE)
        self.assertIsNone(result.winner)
        self.assertEqual(self.out.count("Round is a tie, no points awarded."), 3)
        self.assertEqual(self.out[-1], "The game is a tie!")

    def test_player_two_wins(self):
        m = self._match(fixed_deck(10, 20, 30, 40, 50, 60))
        result = m.play()
        self.assertEqual((result.score_one, result.score_two), (0, 15))
        self.assertIn("Gary wins the round and gets 5 points.", self.out)
        self.assertEqual(self.out[-1], "Gary wins the game!")

    def test_hands_refill_while_deck_lasts(self):
        m = self._match(fixed_deck(80, 70, 60, 50, 40, 30, 20, 10))
        m.deal()
        m.play_round()
        self.assertEqual(m.deck.remaining(), 0)
        self.assertEqual(m.player_one.card_count(), HAND_SIZE)
        self.assertEqual(m.player_two.card_count(), HAND_SIZE)
        result = m.play()
        self.assertEqual(result.rounds, 4)
        self.assertEqual(len(m.played), 8)

    def test_odd_deck_refills_second_player_with_sentinel(self):
        m = self._match(fixed_deck(80, 70, 60, 50, 40, 30, 20))
        m.deal()
        m.play_round()
        self.assertEqual(m.player_two.card_count(), HAND_SIZE)
        self.assertTrue(m.player_two.hand[-1].is_empty())
        self.assertFalse(m.player_one.hand[-1].is_empty())

    def test_staged_mode_pauses_between_boards(self):
        m = self._match(fixed_deck(60, 50, 40, 30, 20, 10), mode=RevealMode.STAGED)
        m.play()
        self.assertEqual(self.pauses, [REVEAL_PROMPT] * 3)
        self.assertEqual(self.out.count("Cards Remaining in Deck: 0"), 6)
        self.assertIn(" |       POKEMON       |", self.out)

    def test_deal_twice_is_rejected(self):
        m = self._match(fixed_deck(60, 50, 40, 30, 20, 10))
        m.deal()
        with self.assertRaises(ValueError):
            m.deal()

    def test_resolve_outside_a_round_is_rejected(self):
        m = self._match(fixed_deck(60, 50, 40, 30, 20, 10))
        with self.assertRaises(ValueError):
            m.resolve(Card("Eevee", 60), Card("Pikachu", 100))
        m.play()
        with self.assertRaises(ValueError):
            m.resolve(Card("Eevee", 60), Card("Pikachu", 100))


class TestComputerMatch(unittest.TestCase):
    def _play(self, seed):
        out = []
        m = Match(AutomatedPlayer("Computer 1", rng=random.Random(seed)),
                  AutomatedPlayer("Computer 2", rng=random.Random(seed + 1)),
                  seed=seed, write=out.append)
        return m, m.play(), out

    def test_full_catalogue_plays_five_rounds(self):
        for seed in range(10):
            m, result, _ = self._play(seed)
            self.assertEqual(result.rounds, 5)
            self.assertEqual(len(m.played), 10)
            self.assertEqual(m.deck.remaining(), 0)
            self.assertFalse(m.player_one.has_cards())
            self.assertFalse(m.player_two.has_cards())

    def test_scores_come_in_round_points(self):
        for seed in range(10):
            _, result, _ = self._play(seed)
            for score in (result.score_one, result.score_two):
                self.assertEqual(score % POINTS_PER_WIN, 0)
            self.assertLessEqual(result.score_one + result.score_two, 5 * POINTS_PER_WIN)
            self.assertIs(result.outcome, final_outcome(result.score_one, result.score_two))

    def test_every_card_is_played_once(self):
        m, _, _ = self._play(4)
        self.assertEqual(sorted(c.name for c in m.played), sorted([
            "Pikachu", "Charizard", "Bulbasaur", "Squirtle", "Tauros",
            "Magmar", "Eevee", "Snorlax", "Dragonite", "Arcanine",
        ]))

    def test_immediate_mode_never_pauses(self):
        m = Match(AutomatedPlayer("A", rng=random.Random(1)),
                  AutomatedPlayer("B", rng=random.Random(2)),
                  seed=1, write=lambda _: None, pause=self.fail)
        self.assertEqual(m.play().rounds, 5)

    def test_match_seed_drives_unseeded_players(self):
        transcripts = set()
        for _ in range(5):
            out = []
            Match(AutomatedPlayer("A"), AutomatedPlayer("B"), seed=3, write=out.append).play()
            transcripts.add(tuple(out))
        self.assertEqual(len(transcripts), 1)

    def test_players_share_the_match_generator(self):
        one, two = AutomatedPlayer("A"), AutomatedPlayer("B")
        Match(one, two, seed=3)
        self.assertIsNotNone(one.rng)
        self.assertIs(one.rng, two.rng)

    def test_injected_player_rng_is_kept(self):
        rng = random.Random(1)
        one = AutomatedPlayer("A", rng=rng)
        two = AutomatedPlayer("B")
        Match(one, two, seed=3)
        self.assertIs(one.rng, rng)
        self.assertIsNot(two.rng, rng)

    def test_same_seeds_replay_the_same_match(self):
        _, _, first = self._play(12)
        _, _, second = self._play(12)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
