import textwrap

from click.testing import CliRunner

from genetic_optimizer.__main__ import cli


CONFIG = textwrap.dedent(
    """
    population_size: 8
    epochs: 4
    num_parents: 2
    num_genes_to_modify: 2
    seed: 3
    genes:
      - {kind: integer, value: 5, min: 0, max: 10}
      - {kind: double, value: 0.0, min: -1.0, max: 1.0}
    """
)

FITNESS = textwrap.dedent(
    """
    def score(genes, gene_count, context):
        bonus = 1.0 if context == "bonus" else 0.0
        return genes[0].current + genes[1].current + bonus
    """
)


def _setup(monkeypatch, tmp_path):
    (tmp_path / "cli_fitness_mod.py").write_text(FITNESS)
    config = tmp_path / "run.yaml"
    config.write_text(CONFIG)
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.chdir(tmp_path)
    return config


def test_cli_run(monkeypatch, tmp_path):
    config = _setup(monkeypatch, tmp_path)
    runner = CliRunner()
    res = runner.invoke(
        cli,
        ["run", "--config", str(config), "--fitness", "cli_fitness_mod:score", "--context", "bonus", "--top", "3"],
    )
    assert res.exit_code == 0, res.output
    assert "epoch 4/4 [100%]" in res.output
    assert "Best score:" in res.output
    assert "gene_1" in res.output


def test_cli_run_is_reproducible(monkeypatch, tmp_path):
    config = _setup(monkeypatch, tmp_path)
    runner = CliRunner()
    args = ["run", "--config", str(config), "--fitness", "cli_fitness_mod:score", "--seed", "11"]
    first = runner.invoke(cli, args)
    second = runner.invoke(cli, args)
    assert first.exit_code == 0
    assert first.output == second.output


def test_cli_rejects_bad_fitness_path(monkeypatch, tmp_path):
    config = _setup(monkeypatch, tmp_path)
    res = CliRunner().invoke(cli, ["run", "--config", str(config), "--fitness", "no_colon"])
    assert res.exit_code != 0
    assert isinstance(res.exception, ValueError)


def test_cli_requires_genes(monkeypatch, tmp_path):
    _setup(monkeypatch, tmp_path)
    empty = tmp_path / "empty.yaml"
    empty.write_text("epochs: 2\n")
    res = CliRunner().invoke(cli, ["run", "--config", str(empty), "--fitness", "cli_fitness_mod:score"])
    assert res.exit_code != 0
    assert "no genes" in res.output


def test_cli_info(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GA_ENV_NAME", "test")
    res = CliRunner().invoke(cli, ["info"])
    assert res.exit_code == 0
    assert "Environment: test" in res.output
