#!/usr/bin/env python3
"""
Tests for saving and loading the app state
"""

import sys
import os
import json
import tempfile
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.models import Person, AppState
from src.data_management import Storage, DataManagement
from src.constants import APP_KEY, THEME_KEY, WINDOW_KEY, AUTO_SAVE_INTERVAL_MS
import unittest


class FakeRoot:
    """Records after() calls instead of running a Tk event loop"""
    def __init__(self):
        self.scheduled = {}
        self.next_id = 1

    def after(self, delay, callback):
        timer_id = f"after#{self.next_id}"
        self.next_id += 1
        self.scheduled[timer_id] = (delay, callback)
        return timer_id

    def after_cancel(self, timer_id):
        self.scheduled.pop(timer_id, None)


class FakeApp:
    def __init__(self, state=None):
        self.root = FakeRoot()
        self.state = state or AppState()
        self.theme_preference = "dark"

    def window_geometry(self):
        return "520x640+10+20"


class TestStorage(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.temp_dir.name, "app.json")

    def tearDown(self):
        self.temp_dir.cleanup()

    def write(self, text):
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(text)

    def test_missing_file_is_empty(self):
        storage = Storage(self.path)
        self.assertEqual(storage.values, {})
        self.assertIsNone(storage.get_value(APP_KEY))

    def test_corrupt_file_is_empty(self):
        self.write("{not json")
        with self.assertLogs('src.data_management', level='WARNING'):
            storage = Storage(self.path)
        self.assertEqual(storage.values, {})

    def test_non_object_file_is_empty(self):
        self.write("[1, 2, 3]")
        with self.assertLogs('src.data_management', level='WARNING'):
            storage = Storage(self.path)
        self.assertEqual(storage.values, {})

    def test_flush_and_reload(self):
        storage = Storage(os.path.join(self.temp_dir.name, "nested", "app.json"))
        storage.set_value("answer", 42)
        storage.flush()
        reloaded = Storage(storage.path)
        self.assertEqual(reloaded.get_value("answer"), 42)
        self.assertEqual(os.listdir(os.path.dirname(storage.path)), ["app.json"])

    def test_failed_flush_keeps_old_file(self):
        storage = Storage(self.path)
        storage.set_value("answer", 42)
        storage.flush()

        storage.set_value("unserializable", object())
        with self.assertRaises(TypeError):
            storage.flush()

        self.assertEqual(os.listdir(self.temp_dir.name), ["app.json"])
        self.assertEqual(Storage(self.path).values, {"answer": 42})


class TestDataManagement(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.temp_dir.name, "app.json")

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_save_then_load_round_trip(self):
        state = AppState()
        state.add(Person("Alice", 30, True))
        state.add(Person("Bob", 12, False))
        state.dialog_open = True
        state.draft = Person("Draft", 77, True)
        app = FakeApp(state)

        self.assertTrue(DataManagement(app, Storage(self.path)).save_state())

        loader = DataManagement(FakeApp(), Storage(self.path))
        loaded = loader.load_state()
        self.assertEqual(loaded.people, [Person("Alice", 30, True), Person("Bob", 12, False)])
        self.assertFalse(loaded.dialog_open)
        self.assertEqual(loaded.draft, Person())
        self.assertEqual(loader.load_theme(), "dark")
        self.assertEqual(loader.load_geometry(), "520x640+10+20")

    def test_load_without_saved_state(self):
        data = DataManagement(FakeApp(), Storage(self.path))
        state = data.load_state()
        self.assertEqual(state.people, [])
        self.assertEqual(data.load_theme(), "system")
        self.assertIsNone(data.load_geometry())

    def test_load_old_records_without_has_phone(self):
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({APP_KEY: {'people': [{'name': 'Old', 'age': 70}]}}, f)
        state = DataManagement(FakeApp(), Storage(self.path)).load_state()
        self.assertEqual(state.people, [Person('Old', 70, False)])

    def test_load_bad_app_value(self):
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({APP_KEY: "oops", THEME_KEY: "purple", WINDOW_KEY: 5}, f)
        data = DataManagement(FakeApp(), Storage(self.path))
        with self.assertLogs('src.data_management', level='WARNING'):
            state = data.load_state()
        self.assertEqual(state.people, [])
        self.assertEqual(data.load_theme(), "system")
        self.assertIsNone(data.load_geometry())

    def test_save_failure_is_logged(self):
        blocker = os.path.join(self.temp_dir.name, "blocker")
        with open(blocker, 'w') as f:
            f.write("file, not a directory")
        storage = Storage(os.path.join(blocker, "app.json"))
        data = DataManagement(FakeApp(), storage)
        with self.assertLogs('src.data_management', level='ERROR'):
            self.assertFalse(data.save_state())

    def test_autosave_reschedules(self):
        app = FakeApp()
        data = DataManagement(app, Storage(self.path))
        data.schedule_autosave()
        (delay, callback), = app.root.scheduled.values()
        self.assertEqual(delay, AUTO_SAVE_INTERVAL_MS)

        app.state.add(Person("Saved by timer"))
        app.root.scheduled.clear()
        callback()

        self.assertTrue(os.path.exists(self.path))
        self.assertEqual(len(app.root.scheduled), 1)
        self.assertEqual(Storage(self.path).get_value(APP_KEY)['people'][0]['name'], "Saved by timer")

    def test_shutdown_cancels_autosave_and_saves(self):
        app = FakeApp()
        app.state.add(Person("Last"))
        data = DataManagement(app, Storage(self.path))
        data.schedule_autosave()

        self.assertTrue(data.shutdown())

        self.assertEqual(app.root.scheduled, {})
        self.assertIsNone(data.autosave_timer)
        self.assertEqual(DataManagement(FakeApp(), Storage(self.path)).load_state().people, [Person("Last")])


if __name__ == "__main__":
    unittest.main(verbosity=2)
