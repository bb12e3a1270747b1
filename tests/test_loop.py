import unittest

from tetris_loop import FrameScheduler


class FrameSchedulerTests(unittest.TestCase):
    def test_runs_each_request_once(self):
        sched = FrameScheduler()
        calls = []
        sched.request(lambda: calls.append("a"))
        sched.request(lambda: calls.append("b"))
        self.assertEqual(sched.run_pending(), 2)
        self.assertEqual(calls, ["a", "b"])
        self.assertEqual(sched.run_pending(), 0)

    def test_cancel(self):
        sched = FrameScheduler()
        calls = []
        handle = sched.request(lambda: calls.append("a"))
        sched.cancel(handle)
        sched.cancel(handle)
        self.assertEqual(sched.run_pending(), 0)
        self.assertEqual(calls, [])

    def test_request_during_frame_waits(self):
        sched = FrameScheduler()
        calls = []

        def again():
            calls.append(len(calls))
            sched.request(again)

        sched.request(again)
        sched.run_pending()
        self.assertEqual(calls, [0])
        self.assertEqual(sched.pending, 1)
        sched.run_pending()
        self.assertEqual(calls, [0, 1])

    def test_cancel_from_earlier_callback(self):
        sched = FrameScheduler()
        calls = []
        second = []
        sched.request(lambda: sched.cancel(second[0]))
        second.append(sched.request(lambda: calls.append("b")))
        self.assertEqual(sched.run_pending(), 1)
        self.assertEqual(calls, [])


if __name__ == "__main__":
    unittest.main()
