"""
Unit Tests for Extraction Mode

Tests for Extractor and extract().
"""

import pytest

from envsettings import Extractor, MissingSettingError, extract


def test_piecemeal_sampling():
    """Test building a record straight from the source."""
    env = {
        'FOO_NAME': 'Margo McGee',
        'FOO_EMAIL': 'margo@example.com',
        'FOO_ENABLED': 'on',
        'FOO_SUPER_MODE': '',
        'FOO_IDEAS': 'good, bad, kinda okay',
        'FOO_POWER_LEVELS': '1:2:4:8',
    }

    def power_levels(value):
        return [] if value is None else sorted(int(v) for v in value.split(':'))

    extracted = extract(lambda e: {
        'name': e.string('FOO_NAME'),
        'email': e.string('FOO_EMAIL'),
        'type': e.string('FOO_TYPE', default='frob'),
        'enabled': e.boolean('FOO_ENABLED'),
        'super_mode': e.boolean('FOO_SUPER_MODE', default=True),
        'ideas': e.list('FOO_IDEAS'),
        'zones': e.list('FOO_ZONES', default=['left', 'right', 'up', 'down']),
        'power_levels': e.custom('FOO_POWER_LEVELS', power_levels),
    }, env)

    assert extracted == {
        'name': 'Margo McGee',
        'email': 'margo@example.com',
        'type': 'frob',
        'enabled': True,
        'super_mode': False,
        'ideas': ['good', 'bad', 'kinda okay'],
        'zones': ['left', 'right', 'up', 'down'],
        'power_levels': [1, 2, 4, 8],
    }


def test_return_value_passed_through():
    """Test the callback's result is returned as-is."""
    marker = object()
    assert extract(lambda e: marker, {}) is marker


def test_missing_required_propagates():
    with pytest.raises(MissingSettingError):
        extract(lambda e: e.string('FOO'), {})


def test_custom_missing_gets_none():
    assert extract(lambda e: e.custom('FOO', lambda v: v or []), {}) == []


class TestExtractor:
    """Test Extractor directly."""

    def test_each_call_resolves_immediately(self):
        extractor = Extractor({'PORT': '5432', 'HOSTS': 'a,b'})

        assert extractor.number('PORT') == 5432
        assert extractor.list('HOSTS') == ['a', 'b']
        assert extractor.boolean('DEBUG') is False

    def test_same_key_any_kind(self):
        """Test there is no persistent declaration per key."""
        extractor = Extractor({'VALUE': '3'})

        assert extractor.string('VALUE') == '3'
        assert extractor.number('VALUE') == 3
        assert extractor.list('VALUE') == ['3']

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv('ENVSETTINGS_TEST_FLAG', 'yes')
        extractor = Extractor()
        assert extractor.boolean('ENVSETTINGS_TEST_FLAG') is True


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
