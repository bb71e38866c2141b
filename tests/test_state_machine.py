"""Tests for the per-frame game flow driven by ``step``.

Most frames use ``dt=0`` so nothing drifts and the ball can be placed
exactly where a collision should happen.
"""
import pytest
from pygame.math import Vector2

from breakout.core.constants import (
    COLOR_BALL,
    COLOR_BLOCK,
    COLOR_BLOCK_CRACKED,
    COLOR_PADDLE,
    PROMPT_LOST,
    PROMPT_MENU,
    PROMPT_WON,
)
from breakout.core.geometry import Rect
from breakout.core.session import GamePhase
from breakout.core.state_manager import step
from breakout.states.playing_state import check_loss, collide_blocks
from breakout.ui.commands import DrawRect, DrawText


def place_below(ball, block_rect):
    """Put a small ball overlapping *block_rect*'s bottom edge, heading up."""
    ball.rect = Rect(block_rect.x + 30, block_rect.bottom - 4, 10, 10)
    ball.velocity = Vector2(0.0, -1.0)


class TestMenu:
    def test_waits_for_start(self, session, frame, measure):
        ball_before = session.ball.rect.copy()
        step(session, frame(dt=0.5, left=True), measure)
        assert session.phase is GamePhase.MENU
        assert session.ball.rect == ball_before

    def test_start_begins_playing(self, session, frame, measure):
        step(session, frame(start=True), measure)
        assert session.phase is GamePhase.PLAYING

    def test_draw_order(self, session, frame, measure):
        commands = step(session, frame(dt=0), measure)

        assert len(commands) == 1 + 36 + 1 + 2
        assert commands[0] == DrawRect(565.0, 620.0, 150.0, 40.0, COLOR_PADDLE)
        assert all(cmd.color == COLOR_BLOCK for cmd in commands[1:37])

        prompt = commands[37]
        width = len(PROMPT_MENU) * 50 * 0.5
        assert prompt.text == PROMPT_MENU
        assert prompt.x == pytest.approx(640 - width / 2)
        assert prompt.y == pytest.approx(360 - 25)

        assert commands[38] == DrawText("score 0", 100.0, 40.0, 30, (0, 0, 0))
        lives = commands[39]
        assert lives.text == "lives: 3"
        assert lives.x == pytest.approx(1280 - (100 + len("lives: 3") * 15))


class TestPlaying:
    @pytest.fixture
    def playing(self, session):
        session.phase = GamePhase.PLAYING
        return session

    def test_ball_is_drawn_instead_of_prompt(self, playing, frame, measure):
        commands = step(playing, frame(dt=0), measure)
        ball = playing.ball.rect
        assert commands[37] == DrawRect(ball.x, ball.y, ball.w, ball.h, COLOR_BALL)
        assert not any(isinstance(cmd, DrawText) and cmd.size == 50 for cmd in commands)

    def test_ball_and_paddle_move(self, playing, frame, measure):
        start_y = playing.ball.rect.y
        step(playing, frame(dt=0.1, right=True), measure)
        assert playing.ball.rect.y > start_y
        assert playing.paddle.rect.x == pytest.approx(565.0 + 70.0)

    def test_block_hit_scores_and_cracks(self, playing, frame, measure):
        target = playing.blocks[0]
        place_below(playing.ball, target.rect)

        commands = step(playing, frame(dt=0), measure)

        assert playing.score == 10
        assert target.hits_remaining == 1
        assert len(playing.blocks) == 36
        assert playing.ball.velocity.y > 0
        assert commands[1].color == COLOR_BLOCK_CRACKED

    def test_second_hit_removes_block(self, playing, frame, measure):
        target = playing.blocks[0]
        for _ in range(2):
            place_below(playing.ball, target.rect)
            step(playing, frame(dt=0), measure)

        assert playing.score == 20
        assert target.hits_remaining == 0
        assert target not in playing.blocks
        assert len(playing.blocks) == 35

    def test_miss_scores_nothing(self, playing, frame, measure):
        step(playing, frame(dt=0), measure)
        assert playing.score == 0
        assert all(block.hits_remaining == 2 for block in playing.blocks)

    def test_paddle_bounce_does_not_score(self, playing, frame, measure):
        playing.ball.rect = Rect(600, 590, 35, 35)  # 5 deep into the paddle top
        playing.ball.velocity = Vector2(0.6, 0.8)

        step(playing, frame(dt=0), measure)

        assert playing.ball.rect.y == pytest.approx(585.0)
        assert playing.ball.velocity.y == pytest.approx(-0.8)
        assert playing.score == 0

    def test_clearing_every_block_wins(self, playing, frame, measure):
        for block in list(playing.blocks):
            for _ in range(2):
                place_below(playing.ball, block.rect)
                step(playing, frame(dt=0), measure)

        assert playing.blocks == []
        assert playing.score == 720
        assert playing.phase is GamePhase.WON
        assert playing.lives == 3

    def test_collide_blocks_counts_hits(self, playing):
        place_below(playing.ball, playing.blocks[0].rect)
        assert collide_blocks(playing) == 1
        assert collide_blocks(playing) == 0


class TestLossCheck:
    @pytest.fixture
    def playing(self, session):
        session.phase = GamePhase.PLAYING
        return session

    def test_ball_inside_playfield_is_not_lost(self, playing, playfield):
        playing.ball.rect.y = playfield.height - 1
        assert check_loss(playing, playfield) is False
        assert playing.lives == 3

    def test_losing_a_life_keeps_playing(self, playing, frame, measure):
        playing.ball.rect.y = 800.0
        step(playing, frame(dt=0), measure)
        assert playing.lives == 2
        assert playing.phase is GamePhase.PLAYING

    def test_last_life_lost(self, playing, frame, measure, uniform):
        playing.lives = 1
        playing.ball.rect.y = 721.0
        uniform.calls.clear()

        step(playing, frame(dt=0), measure)

        assert playing.lives == 0
        assert playing.phase is GamePhase.LOST
        ball, paddle = playing.ball, playing.paddle.rect
        # Relaunched from above the paddle's centre, heading up.
        assert ball.rect.x == pytest.approx(paddle.x + paddle.w / 2)
        assert ball.rect.bottom <= paddle.y
        assert ball.velocity.y < 0
        assert ball.velocity.length() == pytest.approx(1.0)
        assert uniform.calls == [(-1.0, 1.0)]

    def test_loss_beats_win_on_the_same_frame(self, playing, frame, measure):
        playing.lives = 1
        playing.blocks = []
        playing.ball.rect.y = 900.0
        step(playing, frame(dt=0), measure)
        assert playing.phase is GamePhase.LOST


class TestGameOver:
    @pytest.mark.parametrize("phase,prompt", [
        (GamePhase.WON, PROMPT_WON),
        (GamePhase.LOST, PROMPT_LOST),
    ])
    def test_prompt_and_no_physics(self, session, frame, measure, phase, prompt):
        session.phase = phase
        ball_before = session.ball.rect.copy()

        commands = step(session, frame(dt=0.5, right=True), measure)

        assert session.phase is phase
        assert session.ball.rect == ball_before
        assert session.paddle.rect.x == 565.0
        assert any(isinstance(cmd, DrawText) and cmd.text == prompt for cmd in commands)

    @pytest.mark.parametrize("phase", [GamePhase.WON, GamePhase.LOST])
    def test_restart_resets_session(self, session, frame, measure, phase):
        session.phase = phase
        session.score = 480
        session.lives = 0
        session.blocks = session.blocks[:3]
        session.paddle.rect.x = 0.0
        session.ball.rect = Rect(5, 700, 35, 35)

        step(session, frame(start=True), measure)

        assert session.phase is GamePhase.PLAYING
        assert session.score == 0
        assert session.lives == 3
        assert len(session.blocks) == 36
        assert all(block.hits_remaining == 2 for block in session.blocks)
        assert session.paddle.rect.x == 565.0
        assert (session.ball.rect.x, session.ball.rect.y) == (640.0, 360.0)
        assert session.ball.velocity.length() == pytest.approx(1.0)

    def test_restart_uses_configured_grid(self, frame, measure, uniform, playfield):
        from breakout.core.session import SessionState

        session = SessionState.new(playfield, rows=2, cols=3, uniform=uniform)
        session.phase = GamePhase.WON
        session.blocks = []
        step(session, frame(start=True), measure)
        assert len(session.blocks) == 6
