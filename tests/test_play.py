import matplotlib.pyplot as plt
import pytest

from monty_hall import MontyHallGame, Strategy
from simulations.common import format_round_trace
from simulations.methods import simulate
from simulations.play import main
from simulations.plot import plot_batch


class TestCli:
    def test_default_run(self, capsys):
        assert main(["--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "rounds=100" in out
        assert "sequential" in out

    def test_workers(self, capsys):
        assert main(["60", "--seed", "1", "--workers", "3"]) == 0
        assert "partitioned: rounds=60" in capsys.readouterr().out

    def test_trace(self, capsys):
        assert main(["5", "--seed", "2", "--trace"]) == 0
        out = capsys.readouterr().out
        assert out.count("GAME SETUP") == 2
        assert "My initial selection:" in out

    @pytest.mark.parametrize("argv", [["0"], ["-3"], ["10", "--workers", "0"]])
    def test_invalid_arguments_exit_2(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 2


class TestTrace:
    def test_switch_walkthrough(self):
        played = MontyHallGame(seed=6).play_round()
        text = format_round_trace(played, Strategy.SWITCH)
        assert f"My final selection: {played.switch_pick}" in text
        assert text.endswith(played.switch.outcome.value)


class TestPlot:
    def test_plot_batch(self):
        fig = plot_batch(simulate(50, seed=1), show=False)
        assert len(fig.axes) == 2
        plt.close(fig)
