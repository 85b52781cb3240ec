# src/e2e/test_datasets_generate.py

import pytest

from picker.datasets import generate


@pytest.mark.parametrize("kind", ["paths", "commands", "mixed"])
def test_count_and_determinism(kind):
    a = list(generate(200, kind, seed=7))
    b = list(generate(200, kind, seed=7))
    assert len(a) == 200
    assert a == b
    assert all(line and "\n" not in line for line in a)


def test_paths_shape():
    for line in generate(50, "paths", seed=1):
        parts = line.split("/")
        assert 2 <= len(parts) <= 6
        assert "_" in parts[-1] and "." in parts[-1]


def test_commands_end_with_their_index():
    lines = list(generate(10, "commands", seed=3))
    assert all(line.endswith(f"_{i}") for i, line in enumerate(lines))


def test_unknown_kind():
    with pytest.raises(ValueError):
        list(generate(1, "emails"))


def test_zero_count():
    assert list(generate(0, "mixed")) == []
