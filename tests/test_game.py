import random
import pytest
from montyhall.core.config import LabConfig
from montyhall.core.game import Game
from montyhall.core.round import RoundPhase
from montyhall.core.scheduler import ManualScheduler
from montyhall.core.stats import Stats


class TestGame:

    def make_game(self, seed=0, scheduler=None):
        return Game(LabConfig(seed=seed), scheduler=scheduler)

    def play(self, game, door_id, strategy):
        game.select_door(door_id)
        game.advance(game.config.reveal_delay)
        return game.commit_strategy(strategy)

    def test_generate_doors(self):
        game = self.make_game()
        assert len(game.generate_doors()) == 3
        assert len(game.generate_doors(5)) == 5
        with pytest.raises(ValueError):
            game.generate_doors(1)

    def test_paced_round(self):
        game = self.make_game(scheduler=ManualScheduler())
        game.select_door(2)
        assert game.phase == RoundPhase.REVEAL
        assert game.commit_strategy("stay") is None

        game.advance(game.config.reveal_delay)
        assert game.phase == RoundPhase.DECIDE
        outcome = game.commit_strategy("stay")
        assert outcome.final_door_id == 2
        assert game.phase == RoundPhase.RESULT

    def test_cumulative_stats_are_exact_sum(self):
        game = self.make_game(seed=5)
        expected = Stats()

        for i in range(20):
            strategy = "switch" if i % 3 else "stay"
            outcome = self.play(game, i % 3, strategy)
            if strategy == "stay":
                expected.stay_wins += outcome.won
                expected.stay_losses += not outcome.won
            else:
                expected.switch_wins += outcome.won
                expected.switch_losses += not outcome.won
            game.reset_round()

            if i % 5 == 0:
                snapshot = game.run_simulation(150, "random")
                expected.stay_wins += snapshot.stay_wins
                expected.stay_losses += snapshot.stay_losses
                expected.switch_wins += snapshot.switch_wins
                expected.switch_losses += snapshot.switch_losses

        assert game.current_stats() == expected

    def test_run_simulation_defaults(self):
        game = self.make_game()
        snapshot = game.run_simulation()
        assert snapshot.runs == game.config.default_runs
        assert snapshot is game.last_simulation
        assert game.run_simulation(0, "stay").runs == 1
        assert game.run_simulation(10 ** 9, "stay").runs == 50000

    def test_current_stats_is_a_copy(self):
        game = self.make_game()
        stats = game.current_stats()
        stats.switch_wins = 10
        assert game.current_stats().switch_wins == 0

    def test_win_rate(self):
        assert Game.win_rate(0, 0) == "0%"
        assert Game.win_rate(2, 1) == "67%"

    def test_reset_round_is_idempotent(self):
        game = self.make_game()
        self.play(game, 0, "switch")
        game.reset_round()
        game.reset_round()
        state = game.round.state
        assert state.phase == RoundPhase.PICK
        assert state.host_door_id is None
        assert state.final_door_id is None

    def test_shared_rng_is_reproducible(self):
        first = Game(LabConfig(seed=99))
        second = Game(LabConfig(seed=99))
        assert first.round.doors == second.round.doors
        assert first.run_simulation(300, "random") == second.run_simulation(300, "random")

    def test_injected_rng(self):
        game = Game(rng=random.Random(3))
        assert game.rng is game.round.rng is game.simulator.rng

    def test_config_validation(self):
        with pytest.raises(ValueError):
            LabConfig(door_count=2)
        with pytest.raises(ValueError):
            LabConfig(reveal_delay=-1)
        with pytest.raises(ValueError):
            LabConfig(min_runs=10, max_runs=5)
