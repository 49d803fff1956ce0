import pytest

from glide import Cue
from glide.collision import CollisionEngine, is_near_miss
from glide.entities import EffectRing, FloatingText, Hazard, Pickup
from glide.geometry import Rect


def pickup_on_actor(world) -> Pickup:
    return Pickup(x=world.actor.x, y=world.actor.y, radius=9, speed=0.0, pulse=0.0)


def near_miss_hazard(world, offset: float = 40.0) -> Hazard:
    return Hazard(x=world.actor.x + offset, y=world.actor.y, width=40, height=20, speed=0.0)


def test_pickup_bonus_uses_multiplier(quiet_world):
    quiet_world.multiplier = 2.0
    quiet_world.pickups.append(pickup_on_actor(quiet_world))
    report = CollisionEngine().check(quiet_world)
    assert report.pickups_collected == 1
    assert quiet_world.score == 60.0
    assert quiet_world.pickups == []


def test_pickup_emits_ring_text_and_cue(quiet_world):
    quiet_world.pickups.append(pickup_on_actor(quiet_world))
    CollisionEngine().check(quiet_world)
    kinds = [type(e) for e in quiet_world.effects]
    assert kinds == [EffectRing, FloatingText]
    assert quiet_world.effects[1].text == "+30"
    assert quiet_world.cues == [Cue.PICKUP]


def test_simultaneous_pickups_all_count(quiet_world):
    quiet_world.pickups.extend([pickup_on_actor(quiet_world), pickup_on_actor(quiet_world)])
    far = Pickup(x=20, y=20, radius=9, speed=0.0, pulse=0.0)
    quiet_world.pickups.append(far)
    report = CollisionEngine().check(quiet_world)
    assert report.pickups_collected == 2
    assert quiet_world.score == 60.0
    assert quiet_world.pickups == [far]
    assert quiet_world.cues == [Cue.PICKUP, Cue.PICKUP]


def test_hazard_overlap_terminates(quiet_world):
    quiet_world.hazards.append(Hazard(x=quiet_world.actor.x, y=quiet_world.actor.y, width=40, height=20, speed=0.0))
    report = CollisionEngine().check(quiet_world)
    assert report.hit
    assert quiet_world.terminated
    assert quiet_world.cues == [Cue.TERMINATED]
    assert quiet_world.shake.magnitude == 8.0


def test_hit_stops_processing_later_hazards(quiet_world):
    overlapping = Hazard(x=quiet_world.actor.x, y=quiet_world.actor.y, width=40, height=20, speed=0.0)
    quiet_world.hazards.extend([overlapping, near_miss_hazard(quiet_world)])
    CollisionEngine().check(quiet_world)
    assert quiet_world.multiplier == 1.0
    assert Cue.NEAR_MISS not in quiet_world.cues


def test_near_miss_bumps_multiplier(quiet_world):
    quiet_world.hazards.append(near_miss_hazard(quiet_world))
    report = CollisionEngine().check(quiet_world)
    assert report.near_miss
    assert not report.hit
    assert quiet_world.multiplier == pytest.approx(1.1)
    assert quiet_world.near_miss_grace == 0.25
    assert quiet_world.cues == [Cue.NEAR_MISS]
    assert quiet_world.effects[-1].text == "x1.1"
    assert quiet_world.shake.magnitude == 3.0


def test_only_one_near_miss_per_pass(quiet_world):
    quiet_world.hazards.extend([near_miss_hazard(quiet_world, 40.0), near_miss_hazard(quiet_world, -40.0)])
    CollisionEngine().check(quiet_world)
    assert quiet_world.multiplier == pytest.approx(1.1)
    assert quiet_world.cues == [Cue.NEAR_MISS]


def test_near_miss_blocked_during_grace(quiet_world):
    quiet_world.near_miss_grace = 0.1
    quiet_world.hazards.append(near_miss_hazard(quiet_world))
    report = CollisionEngine().check(quiet_world)
    assert not report.near_miss
    assert quiet_world.multiplier == 1.0


def test_near_miss_band_is_asymmetric():
    actor = Rect.centred(100, 100, 30, 30)  # half width 15
    # hazard half width 20 -> touching distance 35, band is (21, 53)
    def hazard_at(gap: float, dy: float = 0.0) -> Rect:
        return Rect.centred(100 + gap, 100 + dy, 40, 10)

    assert is_near_miss(actor, hazard_at(22), 22, 14, 18)
    assert is_near_miss(actor, hazard_at(52.9), 22, 14, 18)
    assert not is_near_miss(actor, hazard_at(21), 22, 14, 18)
    assert not is_near_miss(actor, hazard_at(53), 22, 14, 18)
    assert not is_near_miss(actor, hazard_at(40, dy=22), 22, 14, 18)
    assert is_near_miss(actor, hazard_at(-40, dy=-21.5), 22, 14, 18)
