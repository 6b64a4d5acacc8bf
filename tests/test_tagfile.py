"""Tests for criteria.tagfile module."""

import logging

import pytest

from criteria import Criterion, MatchConfig, Operator
from criteria.registry import CriteriaRegistry
from criteria.tagfile import parse_criteria_line, read_criteria_file
from criteria.tags import Tag


class TestParseCriteriaLine:
    """Tests for single criteria lines."""

    def test_plain(self):
        assert parse_criteria_line('White "Kasparov"') == ('White', Operator.NONE, 'Kasparov')

    @pytest.mark.parametrize('symbol, operator', [
        ('=', Operator.EQUAL),
        ('<>', Operator.NOT_EQUAL),
        ('!=', Operator.NOT_EQUAL),
        ('<', Operator.LESS_THAN),
        ('<=', Operator.LESS_THAN_OR_EQUAL),
        ('>', Operator.GREATER_THAN),
        ('>=', Operator.GREATER_THAN_OR_EQUAL),
        ('~', Operator.REGEX),
    ])
    def test_operators(self, symbol, operator):
        assert parse_criteria_line(f'WhiteElo {symbol} "2700"') == ('WhiteElo', operator, '2700')

    def test_no_space_before_operator(self):
        assert parse_criteria_line('Date>="1990"') == ('Date', Operator.GREATER_THAN_OR_EQUAL, '1990')

    @pytest.mark.parametrize('line', ['', '   ', '% comment', '# comment', 'garbage', 'White Kasparov'])
    def test_ignored_lines(self, line):
        assert parse_criteria_line(line) is None


class TestReadCriteriaFile:
    """Tests for reading criteria files into a registry."""

    def test_sample_file(self, data_dir):
        registry = CriteriaRegistry(MatchConfig())
        assert read_criteria_file(data_dir / 'criteria.txt', registry) == 3
        assert registry.list_for(Tag.PSEUDO_PLAYER) == (Criterion('Kasparov'),)
        assert registry.list_for(Tag.DATE) == (
            Criterion('1990.01.01', Operator.GREATER_THAN_OR_EQUAL),
        )
        assert registry.list_for(Tag.WHITE_ELO) == (Criterion('2700', Operator.GREATER_THAN),)

    def test_unknown_tag_extends_schema(self, tmp_path):
        f = tmp_path / 'tags.txt'
        f.write_text('BlackTeam "Norway"\n', encoding='utf-8')
        registry = CriteriaRegistry(MatchConfig())
        read_criteria_file(f, registry)
        code = registry.schema.code_for('BlackTeam')
        assert code is not None
        assert registry.list_for(code) == (Criterion('Norway'),)

    def test_fen_pattern_forwarded(self, tmp_path):
        f = tmp_path / 'tags.txt'
        f.write_text('FENPattern "8/8/8/4k3/8/8/4P3/4K3"\n', encoding='utf-8')
        registry = CriteriaRegistry(MatchConfig())
        read_criteria_file(f, registry)
        assert len(registry.positions) == 1

    def test_malformed_line_logged(self, tmp_path, caplog):
        f = tmp_path / 'tags.txt'
        f.write_text('% comment\nWhite Kasparov\nBlack "Karpov"\n', encoding='utf-8')
        registry = CriteriaRegistry(MatchConfig())
        with caplog.at_level(logging.WARNING):
            assert read_criteria_file(f, registry) == 1
        assert 'Zeile 2' in caplog.text
        assert 'Zeile 1' not in caplog.text

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            read_criteria_file('nonexistent.txt', CriteriaRegistry(MatchConfig()))
