import numpy as np
from hypothesis import settings
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, initialize, invariant, precondition, rule

from astrolingua import GameConfig, Session, SessionStatus, ShipInput
from astrolingua.sim.projectile import Projectile

flags = st.booleans()


class SessionStateMachine(RuleBasedStateMachine):
    def __init__(self):
        super().__init__()
        self.config = GameConfig()
        self.session: Session | None = None
        self.level_seen = 1
        # True once every current target has been moved (and wrapped) by a step.
        self.targets_settled = False

    @initialize(seed=st.integers(min_value=0, max_value=2**16))
    def init_session(self, seed):
        self.session = Session(self.config, rng=np.random.default_rng(seed))
        self.session.start()
        self.level_seen = 1
        self.targets_settled = False

    @rule(
        thrust=flags,
        left=flags,
        right=flags,
        fire=flags,
        dt=st.floats(min_value=0.0, max_value=4.0, allow_nan=False),
    )
    def advance(self, thrust, left, right, fire, dt):
        state_before = self.session.state
        level_before = state_before.level
        was_running = state_before.status == SessionStatus.RUNNING
        events = self.session.step(ShipInput(thrust, left, right, fire), dt)
        advanced = sum(1 for e in events if e["type"] == "wave")
        assert advanced <= 1
        assert self.session.state.level == level_before + advanced
        if was_running:
            self.targets_settled = advanced == 0

    @precondition(lambda self: self.session.status == SessionStatus.RUNNING)
    @rule(data=st.data())
    def shoot_correct_target(self, data):
        state = self.session.state
        target = state.correct_target
        # Drop a bullet right on it; the next step must advance the level.
        state.projectiles.append(Projectile(pos=target.pos.copy(), vel=np.zeros(2), life=3.0))
        target.vel[:] = 0.0
        level = state.level
        self.session.step(ShipInput(), data.draw(st.floats(min_value=0.0, max_value=0.5)))
        assert self.session.state.level == level + 1
        self.targets_settled = False

    @precondition(lambda self: self.session.status == SessionStatus.RUNNING)
    @rule()
    def drop_shield(self):
        self.session.state.ship.invuln = 0.0

    @rule()
    def toggle_pause(self):
        self.session.toggle_pause()

    @rule()
    def restart(self):
        self.session.reset()
        self.session.start()
        self.targets_settled = False

    @invariant()
    def score_never_negative(self):
        assert self.session.state.score >= 0

    @invariant()
    def lives_bounded(self):
        state = self.session.state
        assert 0 <= state.lives <= self.config.lives
        if state.lives == 0:
            assert state.status == SessionStatus.ENDED

    @invariant()
    def ship_and_projectiles_in_field(self):
        state = self.session.state
        for obj in [state.ship, *state.projectiles]:
            assert 0.0 <= obj.pos[0] < self.config.width
            assert 0.0 <= obj.pos[1] < self.config.height

    @invariant()
    def moved_targets_in_field(self):
        if not self.targets_settled:
            return
        for t in self.session.state.targets:
            assert 0.0 <= t.pos[0] < self.config.width
            assert 0.0 <= t.pos[1] < self.config.height

    @invariant()
    def one_correct_target_matching_prompt(self):
        state = self.session.state
        if state.prompt is None:
            return
        correct = [t for t in state.targets if t.is_correct]
        assert len(correct) == 1
        assert correct[0].text == state.prompt.zh

    @invariant()
    def invulnerability_non_negative(self):
        assert self.session.state.ship.invuln >= 0.0


SessionStateMachine.TestCase.settings = settings(max_examples=30, stateful_step_count=40, deadline=None)
TestSession = SessionStateMachine.TestCase
