from agvnav.encoder import Encoder


def test_pulses_ignored_until_started():
    enc = Encoder()
    enc.pulse_left()
    enc.pulse_right()
    assert (enc.left(), enc.right()) == (0, 0)


def test_counts_while_started():
    enc = Encoder()
    enc.start()
    for _ in range(3):
        enc.pulse_left()
    enc.pulse_right()
    assert (enc.left(), enc.right()) == (3, 1)


def test_start_clears_previous_counts():
    enc = Encoder()
    enc.start()
    enc.pulse_left()
    enc.start()
    assert enc.left() == 0
    assert enc.counting is True


def test_stop_freezes_counts():
    enc = Encoder()
    enc.start()
    enc.pulse_right()
    enc.stop()
    enc.pulse_right()
    enc.pulse_left()
    assert (enc.left(), enc.right()) == (0, 1)
    assert enc.counting is False


def test_reset_zeroes_without_changing_mode():
    enc = Encoder()
    enc.start()
    enc.pulse_left()
    enc.pulse_right()
    enc.reset()
    assert (enc.left(), enc.right()) == (0, 0)
    enc.pulse_left()
    assert enc.left() == 1