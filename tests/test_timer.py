from tetris_timer import LockTimer


def test_poll_fires_once_after_deadline():
    t = LockTimer(200)
    t.arm(1000)
    assert t.armed
    assert not t.poll(1199)
    assert t.poll(1200)
    assert not t.armed
    assert not t.poll(5000)


def test_rearm_replaces_pending_deadline():
    t = LockTimer(200)
    t.arm(0)
    t.arm(150)
    assert not t.poll(200)
    assert t.poll(350)


def test_cancel():
    t = LockTimer(200)
    t.arm(0)
    t.cancel()
    assert not t.armed
    assert not t.poll(1000)


def test_suspend_and_resume_keep_remaining_time():
    t = LockTimer(200)
    t.arm(0)
    t.suspend(120)
    assert not t.poll(10000)
    t.resume(10000)
    assert not t.poll(10079)
    assert t.poll(10080)


def test_resume_without_suspend_is_a_no_op():
    t = LockTimer(200)
    t.resume(500)
    assert not t.armed
    t.suspend(600)
    t.resume(700)
    assert not t.armed
