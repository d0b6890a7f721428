"""
Tests for the Flask routes, driven through the test client.  The engine
runs on its real background event loop with a zero pacing delay.
"""

import time
import unittest

from main import app, close_viz


def wait_for(client, state, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        data = client.get("/api/state").get_json()
        if data["state"] == state:
            return data
        time.sleep(0.01)
    raise AssertionError(f"visualization never reached state {state!r}")


class TestApp(unittest.TestCase):

    def setUp(self):
        close_viz()
        app.config.update(TESTING=True, DELAY_MS=0, DATA_SIZE=10, SEED=1)
        self.client = app.test_client()

    def tearDown(self):
        close_viz()

    def test_index_renders_controls_and_chart(self):
        res = self.client.get("/")
        self.assertEqual(res.status_code, 200)
        html = res.get_data(as_text=True)
        for element_id in ("btn-start", "btn-reset", "data-size-selector", "algo-selector", "sort-time"):
            self.assertIn(f'id="{element_id}"', html)
        self.assertIn('class="visualization"', html)
        self.assertIn("<svg", html)

    def test_initial_state(self):
        data = self.client.get("/api/state").get_json()
        self.assertEqual(data["state"], "idle")
        self.assertEqual(data["data_size"], 10)
        self.assertEqual(len(data["sequence"]), 11)
        self.assertEqual(data["sequence"][-1], max(data["sequence"][:-1]) + 1)
        self.assertEqual(data["controls"]["sort_time"], "0.00 s")
        self.assertEqual(data["svg"].count('class="bar '), 11)

    def test_start_runs_to_completion(self):
        res = self.client.post("/api/start")
        self.assertEqual(res.get_json(), {"started": True})

        data = wait_for(self.client, "finished")
        values = data["sequence"][:-1]
        self.assertEqual(values, sorted(values))
        self.assertFalse(data["controls"]["start_enabled"])
        self.assertTrue(data["controls"]["data_size_enabled"])
        self.assertRegex(data["controls"]["sort_time"], r"^\d+\.\d\d s$")
        self.assertEqual(data["metrics"]["outcome"], "finished")
        self.assertIn('class="bar done"', data["svg"])

    def test_start_ignored_after_finish_until_reset(self):
        self.client.post("/api/start")
        finished = wait_for(self.client, "finished")

        self.assertEqual(self.client.post("/api/start").get_json(), {"started": False})
        after = self.client.get("/api/state").get_json()
        self.assertEqual(after["state"], "finished")
        self.assertEqual(after["controls"], finished["controls"])
        self.assertEqual(after["metrics"], finished["metrics"])

        self.client.post("/api/reset")
        self.assertEqual(self.client.post("/api/start").get_json(), {"started": True})

    def test_reset_after_finish(self):
        self.client.post("/api/start")
        wait_for(self.client, "finished")

        data = self.client.post("/api/reset").get_json()
        self.assertEqual(data["state"], "idle")
        self.assertTrue(data["controls"]["start_enabled"])
        self.assertEqual(data["controls"]["sort_time"], "0.00 s")

    def test_reset_stops_slow_run(self):
        self.client.post("/api/speed", json={"speed": "slow"})
        self.assertTrue(self.client.post("/api/start").get_json()["started"])
        self.assertFalse(self.client.post("/api/start").get_json()["started"])

        res = self.client.post("/api/data", json={"size": 5})
        self.assertEqual(res.status_code, 409)

        data = self.client.post("/api/reset").get_json()
        self.assertEqual(data["state"], "idle")
        self.assertTrue(data["controls"]["start_enabled"])

    def test_new_data_and_algorithm(self):
        res = self.client.post("/api/data", json={"size": 25, "algo": "merge", "seed": 3})
        self.assertEqual(res.status_code, 200)
        data = res.get_json()
        self.assertEqual(data["data_size"], 25)
        self.assertEqual(data["algorithm"], "merge")

        res = self.client.post("/api/algo", json={"algo": "heap"})
        self.assertEqual(res.get_json()["label"], "Heap Sort")
        self.assertEqual(self.client.get("/api/state").get_json()["algorithm"], "heap")

    def test_bad_requests(self):
        self.assertEqual(self.client.post("/api/data", json={"size": "lots"}).status_code, 400)
        self.assertEqual(self.client.post("/api/data", json={"size": -1}).status_code, 400)
        self.assertEqual(self.client.post("/api/data", json={"size": 10, "algo": "bogo"}).status_code, 400)
        self.assertEqual(self.client.post("/api/algo", json={"algo": "bogo"}).status_code, 400)
        self.assertEqual(self.client.post("/api/speed", json={"speed": "warp"}).status_code, 400)
        self.assertEqual(self.client.post("/api/hover", json={"index": "x"}).status_code, 400)

    def test_seed_must_be_an_integer(self):
        for seed in ([1, 2], {"a": 1}, "7", 1.5, True):
            with self.subTest(seed=seed):
                res = self.client.post("/api/data", json={"size": 10, "seed": seed})
                self.assertEqual(res.status_code, 400)
                self.assertIn("seed", res.get_json()["error"])
        self.assertEqual(self.client.post("/api/data", json={"size": 10, "seed": None}).status_code, 200)

    def test_empty_data_finishes_immediately(self):
        self.client.post("/api/data", json={"size": 0})
        self.client.post("/api/start")
        data = wait_for(self.client, "finished")
        self.assertEqual(data["sequence"], [1])

    def test_hover_and_leave(self):
        state = self.client.get("/api/state").get_json()
        res = self.client.post("/api/hover", json={"index": 2}).get_json()
        self.assertEqual(res["label"], str(state["sequence"][2]))
        self.assertIn("hover-label", self.client.get("/api/state").get_json()["svg"])

        self.client.post("/api/leave", json={"index": 2})
        after = self.client.get("/api/state").get_json()
        self.assertNotIn("hover-label", after["svg"])
        self.assertEqual(after["sequence"], state["sequence"])

    def test_hover_outside_chart(self):
        res = self.client.post("/api/hover", json={"index": 500}).get_json()
        self.assertIsNone(res["label"])

    def test_speed_preset(self):
        res = self.client.post("/api/speed", json={"speed": "fast"})
        self.assertEqual(res.get_json(), {"speed": "fast"})
        self.assertEqual(self.client.get("/api/state").get_json()["speed"], "fast")


if __name__ == "__main__":
    unittest.main()
