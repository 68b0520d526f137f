# amoebot

A simulation engine for the amoebot model of programmable matter. Particles
live on the nodes of a triangular lattice. Each one is either contracted,
taking up one node, or expanded, taking up two. A particle sees the world only
through its own compass and its port labels. It moves by expanding,
contracting and doing handovers with its neighbours.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Building blocks

- `amoebot.node.Node` is a frozen, ordered lattice node `(x, y)`.
  `node_in_dir(d)` gives the neighbour in global direction `d`: 0 is E, 1 is
  NE, 2 is NW, 3 is W, 4 is SW and 5 is SE. Other directions raise
  `ValueError`.
- `amoebot.object.Object` is one node of a solid, immovable object. Particles
  can sense it but it never moves.
- `amoebot.metric.Count` is an event counter (`record(num_events)`), and
  `amoebot.metric.Measure` is an abstract quantity with a `calculate()` method
  evaluated every `freq` rounds. Both keep a `history` list.
- `amoebot.rng` is the shared random source: `rand_int`, `rand_dir`,
  `rand_float`, `rand_double`, `rand_bool` and `shuffle`. Call `seed(...)` to
  make a run reproducible.
- `amoebot.particle.Particle` is the drawable base particle: head node, global
  tail direction (-1 when contracted), `tail()`, and colour and marker hooks
  that return -1 (none) by default.
- `amoebot.system.System` is the abstract system base class, with iteration
  over its particles and `has_terminated()` (False by default).
  `amoebot.system.is_connected(particles)` checks whether the occupied nodes
  form one connected component.
- `amoebot.localparticle.LocalParticle` adds the local compass (`orientation`)
  and every port label calculation: label-to-direction conversion, head and
  tail labels, contraction labels, their "after expansion" variants, and
  neighbour compass conversions.
- `amoebot.amoebotparticle.AmoebotParticle` is the abstract particle that
  algorithms subclass by implementing `activate()`. It provides movement
  (`expand`, `contract`, `contract_head`, `contract_tail`, `push`, `pull` with
  their `can_*` checks), neighbour and object queries (`nbr_at_label`,
  `has_nbr_at_label`, `has_head_at_label`, `has_tail_at_label`,
  `has_object_at_label`, `label_of_first_object_nbr`,
  `label_of_first_nbr_with_property`) and token handling (`put_token`,
  `peek_at_token`, `take_token`, `count_tokens`, `has_token`) for subclasses
  of `amoebot.amoebotparticle.Token`. An illegal move raises `ValueError`; a
  missing neighbour or token raises `LookupError`.
- `amoebot.amoebotsystem.AmoebotSystem` holds the particles and objects
  (`insert_particle`, `insert_object`, `remove`) and activates a particle
  chosen uniformly at random. It keeps the `# Rounds`, `# Activations` and
  `# Moves` counts, closes a round once every particle has been activated,
  and exports count and measure histories with `metrics_as_json()`. Further
  measures are added by appending to its `measures` list.
- `amoebot.simulator.Simulator` drives a system: `step()`,
  `step_for_particle_at(node)`, `run_until_termination()`, `num_particles()`,
  `num_objects()`, `metrics()` (a list of `(name, value)` pairs) and
  `export_metrics(directory)`, which writes `metrics/metrics_<time>.json`
  under the directory (the working directory by default) and returns its path.
  `start()` steps the system on a background thread every `step_duration`
  milliseconds (`set_step_duration(ms)`) until `stop()` is called or the
  system terminates. Callbacks can be connected to its `started`, `stopped`,
  `system_changed` and `step_duration_changed` signals.
- `amoebot.view.View` provides viewport arithmetic: the visible bounds,
  clamped zoom, panning and cursor-anchored zooming.
  `amoebot.view.node_to_world_coord` and `amoebot.view.world_coord_to_node`
  convert between lattice nodes and the plane.

## Writing an algorithm

```python
from amoebot.amoebotparticle import AmoebotParticle
from amoebot.amoebotsystem import AmoebotSystem
from amoebot.node import Node
from amoebot.simulator import Simulator
from amoebot import rng


class Wanderer(AmoebotParticle):
    def activate(self):
        if self.is_expanded():
            self.contract_tail()
        else:
            label = rng.rand_dir()
            if self.can_expand(label):
                self.expand(label)


rng.seed(42)
system = AmoebotSystem()
for x in range(5):
    system.insert_particle(Wanderer(Node(x, 0), -1, rng.rand_dir(), system))

sim = Simulator()
sim.set_system(system)
for _ in range(1000):
    sim.step()
print(sim.metrics())
```

## What this package does not do

This is a library only. It has no graphical window or renderer (the `View`
class only does the camera arithmetic), no scripting interface, no
command-line program, and no ready-made algorithms: you write particle
behaviour by subclassing `AmoebotParticle`.