"""Tests for the `python -m fri_fold` vector dump."""

import json

import pytest

from fri_fold.__main__ import main, parse_int_list
from fri_fold.primitives.field import GOLDILOCKS_PRIME
from tests.fri_vectors import FOLDED_COEFFS, FOLDED_DOMAINS, LAYER_EVALUATIONS


REFERENCE_ARGS = [
    '--coeffs', '3,1,2,7,3,5',
    '--domain', '5,7,13,20,1,1,1,1',
    '--betas', '4,3,2',
]


def test_parse_int_list() -> None:
    assert parse_int_list("1, 2,0x10") == [1, 2, 16]
    assert parse_int_list("") == []


def test_reference_layers_json(capsys) -> None:
    assert main(REFERENCE_ARGS) == 0
    out = json.loads(capsys.readouterr().out)

    assert out['modulus'] == 293
    assert [layer['polynomial'] for layer in out['layers']] == FOLDED_COEFFS
    assert [layer['domain'] for layer in out['layers']] == FOLDED_DOMAINS
    assert [layer['evaluations'] for layer in out['layers']] == LAYER_EVALUATIONS


def test_max_degree(capsys) -> None:
    assert main(REFERENCE_ARGS + ['--max-degree', '2']) == 0
    out = json.loads(capsys.readouterr().out)
    assert len(out['layers']) == 1


def test_output_file(tmp_path) -> None:
    output = tmp_path / "vectors" / "layers.json"
    assert main(REFERENCE_ARGS + ['--output', str(output)]) == 0
    out = json.loads(output.read_text())
    assert out['layers'][0]['evaluations'] == LAYER_EVALUATIONS[0]


def test_domain_size_goldilocks(capsys) -> None:
    argv = [
        '--modulus', str(GOLDILOCKS_PRIME),
        '--coeffs', '1,2,3,4,5,6,7,8',
        '--domain-size', '16',
        '--offset', '7',
        '--betas', '11,12,13',
        '--check-domains',
    ]
    assert main(argv) == 0
    out = json.loads(capsys.readouterr().out)
    assert [len(layer['domain']) for layer in out['layers']] == [8, 4, 2]
    assert [len(layer['polynomial']) for layer in out['layers']] == [4, 2, 1]


def test_non_prime_modulus(capsys) -> None:
    assert main(REFERENCE_ARGS + ['--modulus', '294']) == 1
    assert "must be prime" in capsys.readouterr().err


def test_impossible_domain_size(capsys) -> None:
    argv = ['--coeffs', '1,2', '--domain-size', '8', '--betas', '1']
    assert main(argv) == 1
    assert "subgroup of order 8" in capsys.readouterr().err


def test_check_domains_failure(capsys) -> None:
    assert main(REFERENCE_ARGS + ['--check-domains']) == 1
    assert "negation" in capsys.readouterr().err


def test_domain_options_exclusive() -> None:
    with pytest.raises(SystemExit):
        main(['--coeffs', '1', '--domain', '1,2', '--domain-size', '2', '--betas', '1'])
