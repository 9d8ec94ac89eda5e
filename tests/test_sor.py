import numpy as np
import pytest

from numlab.sor import (
    SorConfig,
    initial_grid,
    main,
    relaxed_value,
    run_sor,
    sor_sweep,
)


def small_config(**overrides):
    values = dict(size=5, max_iterations=10, source_row=2, source_column=2)
    values.update(overrides)
    return SorConfig(**values)


def test_initial_grid_layout():
    config = small_config(size=7, border_temp=0.0, initial_temp=20.0, source_temp=100.0)
    grid = initial_grid(config)
    assert grid.shape == (7, 7)
    assert grid[2, 2] == config.source_temp
    assert np.all(grid[0, :] == config.border_temp)
    assert np.all(grid[-1, :] == config.border_temp)
    assert np.all(grid[:, 0] == config.border_temp)
    assert np.all(grid[:, -1] == config.border_temp)
    interior = grid[1:-1, 1:-1].copy()
    interior[1, 1] = config.initial_temp
    assert np.all(interior == config.initial_temp)


def test_default_config_matches_source():
    config = SorConfig()
    grid = initial_grid(config)
    assert grid.shape == (1022, 1022)
    assert grid[800, 800] == 100.0


def test_relaxed_value_extremes():
    current = np.full((3, 3), 100.0)
    previous = np.full((3, 3), 100.0)
    previous[1, 1] = 20.0
    assert relaxed_value(current, previous, 1, 1, 1.0) == pytest.approx(100.0)
    assert relaxed_value(current, previous, 1, 1, 0.0) == pytest.approx(20.0)


def test_relaxed_value_reads_correct_grids():
    current = np.zeros((3, 3))
    previous = np.zeros((3, 3))
    current[0, 1] = 4.0
    current[1, 0] = 4.0
    previous[2, 1] = 4.0
    previous[1, 2] = 4.0
    assert relaxed_value(current, previous, 1, 1, 1.0) == pytest.approx(4.0)
    assert relaxed_value(previous, current, 1, 1, 1.0) == pytest.approx(2.0)


def test_first_sweep_warms_source_neighbours():
    config = small_config()
    previous = initial_grid(config)
    current = previous.copy()
    sor_sweep(current, previous, config)
    neighbours = [(1, 2), (3, 2), (2, 1), (2, 3)]
    for row, column in neighbours:
        assert current[row, column] == pytest.approx(30.0)
    assert current[2, 2] == config.source_temp
    for row in range(1, 4):
        for column in range(1, 4):
            if (row, column) not in neighbours and (row, column) != (2, 2):
                assert current[row, column] == pytest.approx(config.initial_temp)


def test_sweep_leaves_previous_untouched():
    config = small_config(size=8, source_row=4, source_column=3)
    previous = initial_grid(config)
    snapshot = previous.copy()
    current = previous.copy()
    sor_sweep(current, previous, config)
    assert np.array_equal(previous, snapshot)


def test_sweep_rejects_wrong_shape():
    config = small_config()
    with pytest.raises(ValueError):
        sor_sweep(np.zeros((4, 4)), np.zeros((4, 4)), config)


def test_uniform_grid_does_not_change():
    config = small_config(size=9, source_row=4, source_column=4, source_temp=20.0)
    result = run_sor(config)
    assert result.error == 0.0
    assert np.all(result.grid == config.initial_temp)


def test_run_keeps_source_and_border():
    config = small_config(size=9, source_row=4, source_column=4, max_iterations=25)
    result = run_sor(config)
    assert result.iterations == 25
    assert result.grid[4, 4] == config.source_temp
    assert np.all(result.grid[0, :] == config.border_temp)
    assert np.all(result.grid[:, -1] == config.border_temp)


def test_values_stay_between_border_and_source():
    config = small_config(size=11, source_row=5, source_column=6, max_iterations=40)
    grid = run_sor(config).grid
    assert grid.min() >= config.border_temp
    assert grid.max() <= config.source_temp


def test_error_shrinks_with_more_iterations():
    early = run_sor(small_config(size=9, source_row=4, source_column=4, max_iterations=5))
    late = run_sor(small_config(size=9, source_row=4, source_column=4, max_iterations=500))
    assert late.error < early.error


def test_zero_iterations_report_zero_error():
    config = small_config(max_iterations=0)
    result = run_sor(config)
    assert result.error == 0.0
    assert np.array_equal(result.grid, initial_grid(config))


@pytest.mark.parametrize(
    "overrides",
    [
        {"size": 2, "source_row": 0, "source_column": 0},
        {"source_row": 5},
        {"source_column": -1},
        {"max_iterations": -1},
    ],
)
def test_invalid_config_rejected(overrides):
    with pytest.raises(ValueError):
        small_config(**overrides)


def test_main_reports_iterations(capsys):
    argv = ["--size", "5", "--iterations", "3", "--source-row", "2", "--source-column", "2"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "Simulação concluída!" in out
    assert "Tamanho do grid: 5 x 5" in out
    assert "Depois de 3 iterações" in out


def test_main_rejects_source_outside_grid(capsys):
    assert main(["--size", "5"]) == 1
    assert "Erro" in capsys.readouterr().out