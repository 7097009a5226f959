from mini_arcade_core.backend.keys import Key

from space_shooter.input_gate import Action


def test_bindings(gate, keyboard):
    keyboard.press(Key.A)
    assert gate.held(Action.LEFT)
    assert not gate.held(Action.RIGHT)
    keyboard.press(Key.ESCAPE)
    assert gate.held(Action.BACK)


def test_menu_action_priority(gate, keyboard, fake_time):
    fake_time.advance(0.25)
    keyboard.press(Key.ENTER, Key.DOWN)
    allowed = (Action.UP, Action.DOWN, Action.SELECT)
    assert gate.menu_action(allowed) is Action.DOWN


def test_menu_action_ignores_unlisted_keys(gate, keyboard, fake_time):
    fake_time.advance(0.25)
    keyboard.press(Key.P)
    assert gate.menu_action((Action.BACK,)) is None
    # nothing was taken, so the cooldown is still open
    keyboard.press(Key.ESCAPE)
    assert gate.menu_action((Action.BACK,)) is Action.BACK


def test_move_cooldown(gate, keyboard, fake_time):
    keyboard.press(Key.RIGHT)
    assert gate.move_direction() == 0

    fake_time.advance(0.15)
    assert gate.move_direction() == 1
    gate.moved()
    fake_time.advance(0.05)
    assert gate.move_direction() == 0

    keyboard.release_all()
    keyboard.press(Key.LEFT)
    fake_time.advance(0.1)
    assert gate.move_direction() == -1


def test_fire_cooldown(gate, keyboard, fake_time):
    fake_time.advance(0.35)
    assert not gate.fire()

    keyboard.press(Key.SPACE)
    assert gate.fire()
    fake_time.advance(0.2)
    assert not gate.fire()
    fake_time.advance(0.15)
    assert gate.fire()
