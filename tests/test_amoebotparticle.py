from dataclasses import dataclass

import pytest

from amoebot.amoebotparticle import AmoebotParticle, Token
from amoebot.amoebotsystem import AmoebotSystem
from amoebot.node import Node
from amoebot.object import Object

ORIGIN = Node(0, 0)
EAST = ORIGIN.node_in_dir(0)
EAST2 = EAST.node_in_dir(0)


class Walker(AmoebotParticle):
    def __init__(self, head, global_tail_dir, orientation, system, colour="red"):
        super().__init__(head, global_tail_dir, orientation, system)
        self.colour = colour
        self.activations = 0

    def activate(self):
        self.activations += 1


class Marked(Walker):
    def head_mark_dir(self):
        return 1

    def tail_mark_dir(self):
        return 4


class Other(Walker):
    pass


@dataclass
class Energy(Token):
    amount: int = 0


@dataclass
class Signal(Token):
    tag: str = ""


def make(system, head, tail_dir=-1, orientation=0, cls=Walker, **kw):
    p = cls(head, tail_dir, orientation, system, **kw)
    system.insert_particle(p)
    return p


def test_abstract_particle_cannot_be_created():
    with pytest.raises(TypeError):
        AmoebotParticle(ORIGIN, -1, 0, AmoebotSystem())


def test_expand_into_free_node():
    system = AmoebotSystem()
    p = make(system, ORIGIN)
    assert p.can_expand(0)
    p.expand(0)
    assert p.head == EAST
    assert p.tail() == ORIGIN
    assert p.global_tail_dir == 3
    assert system.particle_map[EAST] is p
    assert system.particle_map[ORIGIN] is p
    assert system.get_count("# Moves").value == 1


def test_expand_respects_orientation():
    system = AmoebotSystem()
    p = make(system, ORIGIN, orientation=2)
    p.expand(0)
    assert p.head == ORIGIN.node_in_dir(p.local_to_global_dir(0))
    assert p.tail() == ORIGIN


def test_cannot_expand_onto_particle_or_object_or_when_expanded():
    system = AmoebotSystem()
    p = make(system, ORIGIN)
    make(system, EAST)
    system.insert_object(Object(ORIGIN.node_in_dir(1)))
    assert not p.can_expand(0)
    assert not p.can_expand(1)
    with pytest.raises(ValueError):
        p.expand(0)
    p.expand(2)
    assert not p.can_expand(3)


def test_expand_label_out_of_range():
    p = make(AmoebotSystem(), ORIGIN)
    with pytest.raises(ValueError):
        p.can_expand(6)


def test_contract_tail_keeps_head():
    system = AmoebotSystem()
    p = make(system, ORIGIN)
    p.expand(0)
    p.contract_tail()
    assert p.is_contracted()
    assert p.head == EAST
    assert ORIGIN not in system.particle_map
    assert system.get_count("# Moves").value == 2


def test_contract_head_returns_to_tail():
    system = AmoebotSystem()
    p = make(system, ORIGIN)
    p.expand(0)
    p.contract_head()
    assert p.is_contracted()
    assert p.head == ORIGIN
    assert EAST not in system.particle_map


def test_contract_by_label_matches_named_contractions():
    system = AmoebotSystem()
    p = make(system, ORIGIN)
    p.expand(0)
    p.contract(p.head_contraction_label())
    assert p.head == ORIGIN
    p.expand(0)
    p.contract(p.tail_contraction_label())
    assert p.head == EAST
    assert list(system.particle_map) == [EAST]


def test_contract_rejects_other_labels_and_contracted_particles():
    system = AmoebotSystem()
    p = make(system, ORIGIN)
    with pytest.raises(ValueError):
        p.contract_head()
    with pytest.raises(ValueError):
        p.contract_tail()
    p.expand(0)
    bad = next(label for label in range(10)
               if label not in (p.head_contraction_label(), p.tail_contraction_label()))
    with pytest.raises(ValueError):
        p.contract(bad)


def test_push_into_expanded_neighbour_tail():
    system = AmoebotSystem()
    a = make(system, ORIGIN)
    b = make(system, EAST2, tail_dir=3)
    assert b.tail() == EAST
    assert a.can_push(0)
    a.push(0)
    assert a.head == EAST
    assert a.tail() == ORIGIN
    assert b.is_contracted()
    assert b.head == EAST2
    assert system.particle_map[EAST] is a
    assert system.get_count("# Moves").value == 2
    assert system.get_count("# Activations").value == 1
    assert b in system.activated_particles


def test_push_into_expanded_neighbour_head():
    system = AmoebotSystem()
    a = make(system, ORIGIN)
    b = make(system, EAST, tail_dir=0)
    assert b.tail() == EAST2
    a.push(0)
    assert a.head == EAST
    assert b.is_contracted()
    assert b.head == EAST2
    assert system.particle_map[EAST2] is b


def test_cannot_push_contracted_neighbour():
    system = AmoebotSystem()
    a = make(system, ORIGIN)
    make(system, EAST)
    assert not a.can_push(0)
    with pytest.raises(ValueError):
        a.push(0)


def test_pull_contracted_neighbour():
    system = AmoebotSystem()
    a = make(system, EAST, tail_dir=3)
    b = make(system, EAST2)
    label = a.label_of_nbr_node_in_global_dir(EAST2, 0)
    assert a.is_head_label(label)
    assert a.can_pull(label)
    a.pull(label)
    assert a.is_contracted()
    assert a.head == ORIGIN
    assert b.head == EAST
    assert b.tail() == EAST2
    assert system.particle_map[EAST] is b
    assert system.particle_map[EAST2] is b
    assert system.particle_map[ORIGIN] is a
    assert system.get_count("# Moves").value == 2


def test_pull_over_tail_label():
    system = AmoebotSystem()
    west = ORIGIN.node_in_dir(3)
    a = make(system, EAST, tail_dir=3)
    b = make(system, west)
    label = a.label_of_nbr_node_in_global_dir(west, 3)
    assert a.is_tail_label(label)
    a.pull(label)
    assert a.head == EAST
    assert b.head == ORIGIN
    assert b.tail() == west


def test_cannot_pull_when_contracted():
    system = AmoebotSystem()
    a = make(system, ORIGIN)
    make(system, EAST)
    assert not a.can_pull(0)
    with pytest.raises(ValueError):
        a.pull(0)


def test_head_and_tail_at_label():
    system = AmoebotSystem()
    a = make(system, ORIGIN)
    make(system, EAST, tail_dir=0)
    make(system, ORIGIN.node_in_dir(1))
    assert a.has_nbr_at_label(0)
    assert a.has_head_at_label(0)
    assert not a.has_tail_at_label(0)
    assert a.has_head_at_label(1)
    assert not a.has_tail_at_label(1)
    assert not a.has_nbr_at_label(2)
    assert not a.has_head_at_label(2)
    assert not a.has_tail_at_label(2)


def test_tail_at_label():
    system = AmoebotSystem()
    a = make(system, ORIGIN)
    make(system, EAST2, tail_dir=3)
    assert a.has_tail_at_label(0)
    assert not a.has_head_at_label(0)


def test_nbr_at_label_errors_and_types():
    system = AmoebotSystem()
    a = make(system, ORIGIN)
    b = make(system, EAST, cls=Other)
    assert a.nbr_at_label(0) is b
    assert a.nbr_at_label(0, Other) is b
    with pytest.raises(TypeError):
        a.nbr_at_label(0, Marked)
    with pytest.raises(LookupError):
        a.nbr_at_label(3)


def test_objects_in_neighbourhood():
    system = AmoebotSystem()
    a = make(system, ORIGIN)
    assert not a.has_object_nbr()
    assert a.label_of_first_object_nbr() == -1
    system.insert_object(Object(ORIGIN.node_in_dir(4)))
    system.insert_object(Object(ORIGIN.node_in_dir(2)))
    assert a.has_object_nbr()
    assert a.has_object_at_label(2)
    assert a.label_of_first_object_nbr() == 2
    assert a.label_of_first_object_nbr(3) == 4
    assert a.label_of_first_object_nbr(5) == 2


def test_label_of_first_nbr_with_property():
    system = AmoebotSystem()
    a = make(system, ORIGIN)
    make(system, EAST, colour="blue")
    make(system, ORIGIN.node_in_dir(3), colour="red")
    is_red = lambda p: p.colour == "red"
    assert a.label_of_first_nbr_with_property(is_red) == 3
    assert a.label_of_first_nbr_with_property(lambda p: p.colour == "blue", 1) == 0
    assert a.label_of_first_nbr_with_property(lambda p: False) == -1


def test_mark_directions():
    system = AmoebotSystem()
    plain = make(system, ORIGIN)
    assert plain.head_mark_global_dir() == -1
    assert plain.tail_mark_global_dir() == -1
    marked = make(system, EAST2, orientation=2, cls=Marked)
    assert marked.head_mark_global_dir() == marked.local_to_global_dir(1)
    assert marked.tail_mark_global_dir() == marked.local_to_global_dir(4)


def test_activation_through_system():
    system = AmoebotSystem()
    a = make(system, ORIGIN)
    system.activate_particle_at(ORIGIN)
    assert a.activations == 1
    assert system.get_count("# Rounds").value == 1


def test_token_peek_count_has():
    p = make(AmoebotSystem(), ORIGIN)
    assert not p.has_token(Energy)
    assert p.count_tokens(Energy) == 0
    first, second = Energy(1), Energy(2)
    p.put_token(Signal("s"))
    p.put_token(first)
    p.put_token(second)
    assert p.peek_at_token(Energy) is first
    assert p.peek_at_token(Energy, lambda t: t.amount == 2) is second
    assert p.count_tokens(Energy) == 2
    assert p.count_tokens(Token) == 3
    assert p.count_tokens(Energy, lambda t: t.amount > 1) == 1
    assert p.has_token(Signal)
    assert not p.has_token(Energy, lambda t: t.amount > 5)


def test_take_token_removes_and_reorders():
    p = make(AmoebotSystem(), ORIGIN)
    s1, e1, s2 = Signal("a"), Energy(1), Signal("b")
    for token in (s1, e1, s2):
        p.put_token(token)
    assert p.take_token(Energy) is e1
    assert p.count_tokens(Energy) == 0
    assert p.peek_at_token(Signal) is s1
    assert p.take_token(Signal, lambda t: t.tag == "b") is s2
    assert p.take_token(Signal) is s1
    assert not p.has_token(Token)


def test_missing_token_raises():
    p = make(AmoebotSystem(), ORIGIN)
    p.put_token(Signal("x"))
    with pytest.raises(LookupError):
        p.peek_at_token(Energy)
    with pytest.raises(LookupError):
        p.take_token(Signal, lambda t: t.tag == "y")
    assert p.count_tokens(Signal) == 1