"""Tests for Animal identity, eligibility, eating and reproduction."""

import pytest

from savanna import GLYPHS, Animal, Board, Coord, Sex, Species
from savanna.behaviors import DEFAULT_BEHAVIORS


def make(species, sex, x, y):
    return Animal(species, sex, Coord(x, y))


def populate(board, *animals):
    for a in animals:
        board.add_animal(a)
    return animals


class TestAnimalAttributes:
    @pytest.mark.parametrize("glyph", sorted(GLYPHS))
    def test_glyph_matches_table(self, glyph):
        species, sex = GLYPHS[glyph]
        assert make(species, sex, 0, 0).glyph == glyph

    def test_predator_flag_follows_species(self):
        assert make(Species.LION, Sex.MALE, 0, 0).is_predator
        assert make(Species.CROCODILE, Sex.FEMALE, 0, 0).is_predator
        assert not make(Species.ELEPHANT, Sex.MALE, 0, 0).is_predator
        assert not make(Species.ANTELOPE, Sex.FEMALE, 0, 0).is_predator

    def test_new_animal_is_alive(self):
        assert make(Species.LION, Sex.MALE, 0, 0).alive

    def test_identity_equality(self):
        a = make(Species.LION, Sex.MALE, 0, 0)
        b = make(Species.LION, Sex.MALE, 0, 0)
        assert a != b
        assert a.eid != b.eid
        assert a == a

    def test_default_behavior_comes_from_table(self):
        a = make(Species.ANTELOPE, Sex.FEMALE, 0, 0)
        assert a.behavior is DEFAULT_BEHAVIORS.get(Species.ANTELOPE, Sex.FEMALE)

    def test_repr_mentions_glyph_and_position(self):
        a = make(Species.CROCODILE, Sex.MALE, 2, 3)
        assert "K#" in repr(a)
        assert "(2, 3)" in repr(a)


class TestEligibility:
    def test_predator_can_eat_prey(self):
        lion = make(Species.LION, Sex.MALE, 0, 0)
        assert lion.can_eat(make(Species.ANTELOPE, Sex.MALE, 0, 1))
        assert lion.can_eat(make(Species.ELEPHANT, Sex.FEMALE, 0, 1))

    def test_predator_cannot_eat_predator(self):
        lion = make(Species.LION, Sex.MALE, 0, 0)
        assert not lion.can_eat(make(Species.CROCODILE, Sex.MALE, 0, 1))

    def test_prey_cannot_eat(self):
        antelope = make(Species.ANTELOPE, Sex.MALE, 0, 0)
        assert not antelope.can_eat(make(Species.ELEPHANT, Sex.MALE, 0, 1))

    def test_cannot_eat_dead_prey(self):
        prey = make(Species.ANTELOPE, Sex.MALE, 0, 1)
        prey.alive = False
        assert not make(Species.LION, Sex.MALE, 0, 0).can_eat(prey)

    def test_mate_requires_same_species_opposite_sex(self):
        male = make(Species.ELEPHANT, Sex.MALE, 0, 0)
        assert male.can_mate(make(Species.ELEPHANT, Sex.FEMALE, 0, 1))
        assert not male.can_mate(make(Species.ELEPHANT, Sex.MALE, 0, 1))
        assert not male.can_mate(make(Species.ANTELOPE, Sex.FEMALE, 0, 1))
        assert not male.can_mate(male)


class TestEat:
    def test_eats_first_prey_in_neighbor_order(self):
        board = Board()
        lion, up_prey, left_prey = populate(
            board,
            make(Species.LION, Sex.MALE, 1, 1),
            make(Species.ANTELOPE, Sex.MALE, 1, 2),
            make(Species.ELEPHANT, Sex.MALE, 2, 1),
        )
        eaten = lion.eat(board)
        assert eaten is up_prey
        assert not up_prey.alive
        assert up_prey not in board
        assert left_prey.alive and left_prey in board
        assert lion.coord == Coord(1, 1)
        assert len(board) == 2

    def test_skips_predator_neighbors(self):
        board = Board()
        lion, croc, prey = populate(
            board,
            make(Species.LION, Sex.MALE, 1, 1),
            make(Species.CROCODILE, Sex.MALE, 1, 2),
            make(Species.ANTELOPE, Sex.FEMALE, 0, 1),
        )
        assert lion.eat(board) is prey
        assert croc.alive

    def test_no_prey_is_noop(self):
        board = Board()
        lion, _ = populate(
            board,
            make(Species.LION, Sex.MALE, 0, 0),
            make(Species.LION, Sex.FEMALE, 0, 1),
        )
        assert lion.eat(board) is None
        assert len(board) == 2

    def test_prey_does_not_eat(self):
        board = Board()
        elephant, antelope = populate(
            board,
            make(Species.ELEPHANT, Sex.MALE, 0, 0),
            make(Species.ANTELOPE, Sex.MALE, 0, 1),
        )
        assert elephant.eat(board) is None
        assert antelope.alive


class TestReproduction:
    def test_offspring_on_first_free_cell(self):
        board = Board()
        male, female = populate(
            board,
            make(Species.ELEPHANT, Sex.MALE, 1, 1),
            make(Species.ELEPHANT, Sex.FEMALE, 1, 2),
        )
        busy = set()
        child = male.attempt_reproduction(board, busy)
        assert child is not None
        assert child.species is Species.ELEPHANT
        assert child.sex is Sex.MALE
        assert child.coord == Coord(1, 0)
        assert child.behavior is male.behavior
        assert board.at(Coord(1, 0)) is child
        assert busy == {male.eid, female.eid, child.eid}

    def test_no_free_cell_creates_nothing(self):
        board = Board()
        male, female, *_ = populate(
            board,
            make(Species.ELEPHANT, Sex.MALE, 1, 1),
            make(Species.ELEPHANT, Sex.FEMALE, 1, 2),
            make(Species.ANTELOPE, Sex.MALE, 1, 0),
            make(Species.ANTELOPE, Sex.MALE, 2, 1),
            make(Species.ANTELOPE, Sex.MALE, 0, 1),
        )
        busy = set()
        assert male.attempt_reproduction(board, busy) is None
        assert len(board) == 5
        assert busy == {male.eid, female.eid}

    def test_busy_partner_is_skipped(self):
        board = Board()
        male, female = populate(
            board,
            make(Species.LION, Sex.MALE, 0, 0),
            make(Species.LION, Sex.FEMALE, 0, 1),
        )
        busy = {female.eid}
        assert male.attempt_reproduction(board, busy) is None
        assert len(board) == 2
        assert male.eid not in busy

    def test_busy_initiator_does_nothing(self):
        board = Board()
        male, _ = populate(
            board,
            make(Species.LION, Sex.MALE, 0, 0),
            make(Species.LION, Sex.FEMALE, 0, 1),
        )
        assert male.attempt_reproduction(board, {male.eid}) is None
        assert len(board) == 2

    def test_same_sex_neighbors_do_not_breed(self):
        board = Board()
        a, _ = populate(
            board,
            make(Species.ANTELOPE, Sex.FEMALE, 0, 0),
            make(Species.ANTELOPE, Sex.FEMALE, 0, 1),
        )
        assert a.attempt_reproduction(board, set()) is None
        assert len(board) == 2


class TestMove:
    def test_move_returns_origin(self):
        board = Board()
        (elephant,) = populate(board, make(Species.ELEPHANT, Sex.MALE, 0, 0))
        origin = elephant.move(board, None)
        assert origin == Coord(0, 0)
        assert elephant.coord == Coord(0, 1)
        assert board.at(Coord(0, 1)) is elephant

    def test_staying_returns_none(self):
        board = Board()
        male, _ = populate(
            board,
            make(Species.ELEPHANT, Sex.MALE, 0, 0),
            make(Species.ELEPHANT, Sex.FEMALE, 0, 1),
        )
        assert male.move(board, None) is None
        assert male.coord == Coord(0, 0)
