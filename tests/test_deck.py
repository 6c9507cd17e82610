import random
import unittest
from collections import Counter

from pokebattle.core.card import Card, EMPTY_CARD
from pokebattle.core.deck import CATALOGUE, Deck


class TestDeck(unittest.TestCase):
    def test_new_deck_holds_the_catalogue_once(self):
        for seed in range(20):
            deck = Deck.new_shuffled(seed=seed)
            self.assertEqual(deck.remaining(), 10)
            self.assertEqual(Counter((c.name, c.strength) for c in deck.cards),
                             Counter(CATALOGUE))

    def test_catalogue_values(self):
        damage = dict(CATALOGUE)
        self.assertEqual(damage["Pikachu"], 100)
        self.assertEqual(damage["Arcanine"], 90)
        self.assertEqual(damage["Bulbasaur"], damage["Squirtle"])
        self.assertEqual(len(CATALOGUE), 10)

    def test_same_seed_same_order(self):
        a = Deck.new_shuffled(seed=42)
        b = Deck.new_shuffled(seed=42)
        self.assertEqual([c.name for c in a.cards], [c.name for c in b.cards])

    def test_injected_rng_is_used(self):
        a = Deck.new_shuffled(rng=random.Random(3))
        b = Deck.new_shuffled(seed=3)
        self.assertEqual([c.name for c in a.cards], [c.name for c in b.cards])

    def test_draw_takes_from_the_end(self):
        deck = Deck(cards=[Card("Eevee", 60), Card("Pikachu", 100)])
        self.assertEqual(deck.draw().name, "Pikachu")
        self.assertEqual(deck.draw().name, "Eevee")

    def test_remaining_drops_by_one_per_draw(self):
        deck = Deck.new_shuffled(seed=1)
        for expected in range(9, -1, -1):
            card = deck.draw()
            self.assertFalse(card.is_empty())
            self.assertEqual(deck.remaining(), expected)

    def test_empty_deck_yields_sentinel(self):
        deck = Deck(cards=[])
        card = deck.draw()
        self.assertIs(card, EMPTY_CARD)
        self.assertTrue(card.is_empty())
        self.assertEqual(deck.remaining(), 0)
        deck.draw()
        self.assertEqual(deck.remaining(), 0)

    def test_peek_cards_is_a_snapshot(self):
        deck = Deck.new_shuffled(seed=5)
        snapshot = deck.peek_cards()
        deck.draw()
        self.assertEqual(len(snapshot), 10)
        self.assertEqual(deck.remaining(), 9)


if __name__ == "__main__":
    unittest.main()
