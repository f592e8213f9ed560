import pytest
import requests

from client.submitter import Submitter, SubmitResult
from utils.load_generator import RUNNING, STOPPED, LoadGenerator, batch_factory
from fakes import FakeResponse, FakeSession


class ScriptedSubmitter:
    """Returns the scripted codes in order, then 0 forever."""
    def __init__(self, codes=()):
        self.codes = list(codes)
        self.batches = []

    def submit(self, batch):
        self.batches.append(batch)
        code = self.codes.pop(0) if self.codes else 0
        return SubmitResult(code, 204 if code == 0 else None, 0.001)


def _factory():
    return batch_factory(5, ["ks_a", "ks_b"], 100)


def test_bounded_run_performs_exact_cycles():
    sub = ScriptedSubmitter()
    lg = LoadGenerator(_factory(), sub, iterations=3)

    assert lg.run() == 0
    assert lg.cycles == 3
    assert len(sub.batches) == 3
    assert lg.state == STOPPED


def test_unbounded_run_stops_on_second_failure():
    sub = ScriptedSubmitter([0, 2])
    lg = LoadGenerator(_factory(), sub, iterations=0)

    assert lg.run() == 2
    assert lg.cycles == 2


def test_bounded_run_stops_early_on_failure():
    sub = ScriptedSubmitter([0, 0, 2])
    lg = LoadGenerator(_factory(), sub, iterations=10)
    assert lg.run() == 2
    assert lg.cycles == 3


def test_informational_status_does_not_stop_the_loop():
    session = FakeSession([FakeResponse(500, "boom"), FakeResponse(200, "error"), FakeResponse(204)])
    lg = LoadGenerator(_factory(), Submitter("h", session=session), iterations=3)

    assert lg.run() == 0
    assert len(session.calls) == 3


def test_unbounded_with_transport_error_on_second_request():
    session = FakeSession([FakeResponse(204), requests.exceptions.ConnectTimeout("timeout")])
    lg = LoadGenerator(_factory(), Submitter("h", session=session), iterations=0)

    assert lg.run() != 0
    assert len(session.calls) == 2


def test_tick_walks_the_state_machine():
    lg = LoadGenerator(_factory(), ScriptedSubmitter(), iterations=2)
    assert lg.state == RUNNING
    lg.tick()
    assert (lg.state, lg.cycles, lg.result) == (RUNNING, 1, None)
    lg.tick()
    assert (lg.state, lg.cycles, lg.result) == (STOPPED, 2, 0)
    lg.tick()
    assert lg.cycles == 2


def test_fresh_batch_each_cycle():
    sub = ScriptedSubmitter()
    LoadGenerator(_factory(), sub, iterations=2).run()
    assert sub.batches[0] is not sub.batches[1]
    assert all(len(b) == 5 for b in sub.batches)


def test_bad_generator_config_stops_with_fatal_code():
    sub = ScriptedSubmitter()
    lg = LoadGenerator(batch_factory(5, [], 100), sub, iterations=0)
    assert lg.run() == 2
    assert sub.batches == []


def test_negative_iterations_rejected():
    with pytest.raises(ValueError):
        LoadGenerator(_factory(), ScriptedSubmitter(), iterations=-1)
