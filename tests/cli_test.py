import io
import json
import logging

import pytest

from folding.cli import InvalidInput, argument_parser, main, summarize_lines, tokens


def _run(argv, text):
    stdout = io.StringIO()
    status = main(argv, io.StringIO(text), stdout)
    return status, stdout.getvalue()


def test_tokens():
    assert list(tokens(['1 2', '', '  3\n'])) == [(1, '1'), (2, '2'), (3, '3')]


def test_summarize_lines():
    summary = summarize_lines(['1 2', '3 4'])

    assert summary.length == 4
    assert summary.mean == 2.5


def test_invalid_token():
    with pytest.raises(InvalidInput) as error:
        summarize_lines(['1 2', 'three'])

    assert error.value.token == 'three'
    assert error.value.position == 3


def test_json_output():
    status, output = _run([], '1 2 3 4\n')

    assert status == 0
    assert json.loads(output) == {
        'length' : 4,
        'sum'    : 10.0,
        'mean'   : 2.5,
        'minimum': 1.0,
        'maximum': 4.0,
        'first'  : 1.0,
        'last'   : 4.0
    }


def test_text_output():
    status, output = _run(['--format', 'text'], '5\n')

    assert status == 0
    assert 'maximum: 5.0' in output


def test_template_file(tmp_path):
    template = tmp_path / 'summary.mustache'
    template.write_text('{{first}} -> {{last}}')

    status, output = _run(['--format', 'text', '--template', str(template)], '1 2 3')

    assert status == 0
    assert output == '1.0 -> 3.0\n'


def test_input_file(tmp_path):
    numbers = tmp_path / 'numbers.txt'
    numbers.write_text('10\n20\n')

    status, output = _run(['--input', str(numbers)], '')

    assert status == 0
    assert json.loads(output)['sum'] == 30.0


def test_missing_input_file(tmp_path):
    status, output = _run(['--input', str(tmp_path / 'missing.txt')], '')

    assert status == 2
    assert output == ''


def test_invalid_input_status():
    status, output = _run([], '1 x')

    assert status == 2
    assert output == ''


def test_environment(monkeypatch):
    monkeypatch.setenv('FOLDING_FORMAT', 'text')
    monkeypatch.setenv('FOLDING_VERBOSITY', 'debug')

    args = argument_parser().parse_args([])

    assert args.format == 'text'
    assert args.verbosity == logging.DEBUG


def test_undecodable_input_file(tmp_path):
    numbers = tmp_path / 'numbers.txt'
    numbers.write_bytes(b'1 2 \xff\xfe 3')

    status, output = _run(['--input', str(numbers)], '')

    assert status == 2
    assert output == ''


@pytest.mark.parametrize('token', ['nan', 'inf', '-Infinity'])
def test_non_finite_token(token):
    with pytest.raises(InvalidInput) as error:
        summarize_lines([f'1 {token} 3'])

    assert error.value.token == token
    assert error.value.position == 2


def test_non_finite_input_status():
    status, output = _run([], '1 nan 3')

    assert status == 2
    assert output == ''


def test_overflowing_sum_status():
    status, output = _run([], '1e308 1e308')

    assert status == 2
    assert output == ''
