import pytest
from fastapi.testclient import TestClient

from main import create_app
from pathsandbox.utils.config import SandboxConfig


@pytest.fixture
def client():
    config = SandboxConfig(width=5, height=5, start=(0, 2), goal=(4, 2))
    return TestClient(create_app(config))


def post(client, command):
    response = client.post("/commands", json={"command": command})
    assert response.status_code == 200, response.text
    return response.json()


def test_status(client):
    response = client.get("/status")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_snapshot_shape(client):
    data = client.get("/snapshot").json()
    assert data["grid"]["width"] == 5
    assert len(data["grid"]["blocked"]) == 25
    assert data["grid"]["cost"] == [1] * 25
    assert data["session"]["start"] == {"x": 0, "y": 2}
    assert data["session"]["state"] == "dirty"
    assert data["session"]["strategy"] == "bfs"


def test_edit_solve_step_round(client):
    event = post(client, {"kind": "edit", "x": 2, "y": 2})
    assert event["accepted"] is True
    assert event["snapshot"]["grid"]["blocked"][2 * 5 + 2] is True

    event = post(client, {"kind": "solve"})
    session = event["snapshot"]["session"]
    assert session["state"] == "solved"
    assert session["path"][0] == {"x": 0, "y": 2}
    assert session["path"][-1] == {"x": 4, "y": 2}
    assert {"x": 2, "y": 2} not in session["path"]

    event = post(client, {"kind": "step"})
    assert event["snapshot"]["session"]["step"] == 1


def test_rejected_command_is_not_an_http_error(client):
    event = post(client, {"kind": "edit", "x": 0, "y": 2})
    assert event["accepted"] is False
    assert event["error"] == "invalid_target"


def test_malformed_command_is_422(client):
    response = client.post("/commands", json={"command": {"kind": "edit", "x": "left"}})
    assert response.status_code == 422
    response = client.post("/commands", json={"command": {"kind": "fly"}})
    assert response.status_code == 422


def test_batch_runs_in_order(client):
    response = client.post("/commands/batch", json={"commands": [
        {"kind": "select_strategy", "strategy": "dijkstra"},
        {"kind": "set_placement_mode", "mode": "increase_cost"},
        {"kind": "adjust_cost", "x": 2, "y": 2},
        {"kind": "solve"},
        {"kind": "clear"},
    ]})
    assert response.status_code == 200
    events = response.json()
    assert [e["command"] for e in events] == [
        "select_strategy", "set_placement_mode", "adjust_cost", "solve", "clear",
    ]
    assert events[2]["snapshot"]["grid"]["cost"][12] == 2
    assert events[3]["snapshot"]["session"]["total_cost"] == 5
    assert events[4]["snapshot"]["grid"]["cost"][12] == 1
    assert client.get("/snapshot").json() == events[4]["snapshot"]


def test_failing_listener_does_not_fail_the_request(client):
    def crash(event):
        raise RuntimeError("renderer crashed")

    client.app.state.sandbox.subscribe(crash)
    event = post(client, {"kind": "edit", "x": 2, "y": 2})
    assert event["accepted"] is True
    assert event["snapshot"]["grid"]["blocked"][2 * 5 + 2] is True
