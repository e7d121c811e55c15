"""
Phrasegen Tests

Tests for word sampling, passphrase generation, validation, and entropy.
"""

import math
from collections import Counter

import pytest
from scipy.stats import chisquare

import phrasegen
from phrasegen import (
    Dictionary,
    EmptyDictionaryError,
    GenerationConfig,
    GenerationError,
    InvalidRangeError,
    LengthConstraintError,
    MAX_LENGTH_ATTEMPTS,
    Passphrase,
    PassphraseGenerator,
    SamplingError,
    SecureRandom,
    SeededRandom,
    WordSampler,
    analyze,
    brute_force_entropy,
    choose_word_count,
    generate_passphrase,
    generate_passphrases,
    known_method_entropy,
    load_dictionary,
    require_valid_config,
    require_valid_dictionary,
    sample_word,
    validate_config,
    validate_dictionary,
    __version__,
)
from phrasegen.constants import BRUTE_FORCE_CHARSETS
from phrasegen.random_source import randint_inclusive


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def small_dict():
    """Ten distinct words."""
    return Dictionary(
        words=("ant", "bee", "cat", "dog", "eel", "fox", "gnu", "hen", "jay", "koi"),
        source="test",
    )


@pytest.fixture
def empty_dict():
    return Dictionary(words=(), source="empty")


class ExplodingRandom:
    """Fails the test if any randomness is consumed."""

    def randbelow(self, n):
        raise AssertionError("random source should not be used")


# =============================================================================
# Random Source Tests
# =============================================================================

class TestRandomSource:
    def test_seeded_is_reproducible(self):
        a = SeededRandom(99)
        b = SeededRandom(99)
        assert [a.randbelow(1000) for _ in range(50)] == [b.randbelow(1000) for _ in range(50)]

    def test_secure_randbelow_in_range(self):
        rng = SecureRandom()
        for _ in range(200):
            assert 0 <= rng.randbelow(7) < 7

    @pytest.mark.parametrize("rng", [SecureRandom(), SeededRandom(1)])
    def test_randbelow_rejects_non_positive(self, rng):
        with pytest.raises(ValueError):
            rng.randbelow(0)

    def test_randint_inclusive_hits_both_ends(self):
        rng = SeededRandom(5)
        seen = {randint_inclusive(rng, 2, 4) for _ in range(300)}
        assert seen == {2, 3, 4}

    def test_randint_inclusive_empty_range(self):
        with pytest.raises(ValueError):
            randint_inclusive(SeededRandom(1), 5, 4)

    def test_sources_satisfy_protocol(self):
        assert isinstance(SecureRandom(), phrasegen.RandomSource)
        assert isinstance(SeededRandom(), phrasegen.RandomSource)


# =============================================================================
# Sampler Tests
# =============================================================================

class TestSampler:
    def test_sample_is_member(self, small_dict):
        rng = SeededRandom(3)
        for _ in range(100):
            assert sample_word(small_dict, rng) in small_dict

    def test_sample_empty_fails(self, empty_dict):
        with pytest.raises(EmptyDictionaryError) as exc_info:
            sample_word(empty_dict, SeededRandom(1))
        assert exc_info.value.dictionary_size == 0
        assert isinstance(exc_info.value, SamplingError)

    def test_sampler_allows_repeats(self):
        single = Dictionary(words=("only",))
        assert WordSampler(single, SeededRandom(1)).sample_many(4) == ["only"] * 4

    def test_sample_many_negative(self, small_dict):
        with pytest.raises(ValueError):
            WordSampler(small_dict, SeededRandom(1)).sample_many(-1)

    def test_uniform_selection_seeded(self, small_dict):
        """Chi-square goodness of fit against the uniform distribution."""
        rng = SeededRandom(12345)
        draws = 20_000
        counts = Counter(sample_word(small_dict, rng) for _ in range(draws))
        observed = [counts[word] for word in small_dict]
        assert sum(observed) == draws
        assert chisquare(observed).pvalue > 0.001

    def test_uniform_selection_secure(self):
        """Non-power-of-two size, to catch modulo bias."""
        dictionary = Dictionary(words=tuple(f"w{i}" for i in range(7)))
        sampler = WordSampler(dictionary, SecureRandom())
        counts = Counter(sampler.sample_many(21_000))
        observed = [counts[word] for word in dictionary]
        assert chisquare(observed).pvalue > 1e-6


# =============================================================================
# Generator Tests
# =============================================================================

class TestGenerator:
    def test_default_config(self, small_dict):
        passphrases = generate_passphrases(GenerationConfig(), small_dict, SeededRandom(1))
        assert len(passphrases) == 1
        assert passphrases[0].word_count == 3

    def test_word_count_within_range(self, small_dict):
        config = GenerationConfig(min_words=1, max_words=4, passphrase_count=300)
        passphrases = generate_passphrases(config, small_dict, SeededRandom(8))
        counts = {p.word_count for p in passphrases}
        assert counts == {1, 2, 3, 4}

    def test_words_are_members(self, small_dict):
        config = GenerationConfig(min_words=2, max_words=6, max_len=0, passphrase_count=50)
        for passphrase in generate_passphrases(config, small_dict, SeededRandom(2)):
            assert all(word in small_dict for word in passphrase.words)

    def test_no_separator_by_default(self, small_dict):
        passphrase = generate_passphrase(GenerationConfig(), small_dict, SeededRandom(4))
        assert passphrase.text == "".join(passphrase.words)
        assert passphrase.length == sum(len(w) for w in passphrase.words)

    def test_separator(self, small_dict):
        config = GenerationConfig(separator=" ")
        passphrase = generate_passphrase(config, small_dict, SeededRandom(4))
        assert passphrase.text.split(" ") == list(passphrase.words)

    def test_same_seed_same_output(self, small_dict):
        config = GenerationConfig(min_words=2, max_words=5, passphrase_count=10, max_len=0)
        first = generate_passphrases(config, small_dict, SeededRandom(2024))
        second = generate_passphrases(config, small_dict, SeededRandom(2024))
        assert first == second

    def test_zero_count_returns_empty(self, small_dict, empty_dict):
        config = GenerationConfig(passphrase_count=0)
        assert generate_passphrases(config, small_dict) == []
        assert generate_passphrases(config, empty_dict) == []

    def test_empty_dictionary_fails(self, empty_dict):
        with pytest.raises(EmptyDictionaryError) as exc_info:
            generate_passphrases(GenerationConfig(), empty_dict)
        assert isinstance(exc_info.value, GenerationError)

    def test_zero_words(self, small_dict):
        config = GenerationConfig(min_words=0, max_words=0, passphrase_count=2)
        passphrases = generate_passphrases(config, small_dict, SeededRandom(1))
        assert [p.text for p in passphrases] == ["", ""]

    def test_fixed_word_count_uses_no_randomness(self):
        config = GenerationConfig(min_words=4, max_words=4)
        assert choose_word_count(config, ExplodingRandom()) == 4

    def test_length_range_enforced(self):
        dictionary = Dictionary(words=("ab", "abcdef"))
        config = GenerationConfig(min_words=2, max_words=2, min_len=12, max_len=12,
                                  passphrase_count=5)
        for passphrase in generate_passphrases(config, dictionary, SeededRandom(6)):
            assert passphrase.text == "abcdefabcdef"

    def test_length_range_unsatisfiable(self):
        dictionary = Dictionary(words=("abc",))
        config = GenerationConfig(min_words=1, max_words=2, min_len=10, max_len=20)
        with pytest.raises(LengthConstraintError) as exc_info:
            generate_passphrases(config, dictionary, SeededRandom(1))
        error = exc_info.value
        assert error.attempts == MAX_LENGTH_ATTEMPTS
        assert error.length_range == (10, 20)
        assert error.word_range == (1, 2)
        assert error.dictionary_size == 1

    def test_custom_attempt_ceiling(self):
        dictionary = Dictionary(words=("abc",))
        config = GenerationConfig(min_words=1, max_words=1, min_len=5, max_len=6)
        with pytest.raises(LengthConstraintError) as exc_info:
            generate_passphrase(config, dictionary, SeededRandom(1), max_attempts=3)
        assert exc_info.value.attempts == 3

    def test_length_not_enforced_without_minimum(self):
        """A zero bound disables the length check."""
        dictionary = Dictionary(words=("abcdefghij",))
        config = GenerationConfig(min_words=3, max_words=3, min_len=0, max_len=5)
        passphrase = generate_passphrase(config, dictionary, SeededRandom(1))
        assert passphrase.length == 30

    def test_invalid_word_range(self, small_dict):
        config = GenerationConfig(min_words=5, max_words=3)
        with pytest.raises(InvalidRangeError) as exc_info:
            generate_passphrases(config, small_dict)
        assert exc_info.value.field == "word count"
        assert (exc_info.value.minimum, exc_info.value.maximum) == (5, 3)

    def test_invalid_length_range(self, small_dict):
        config = GenerationConfig(min_len=20, max_len=10)
        with pytest.raises(InvalidRangeError):
            generate_passphrases(config, small_dict)

    def test_generator_class(self, small_dict):
        generator = PassphraseGenerator(small_dict, SeededRandom(11))
        passphrases = generator.generate(GenerationConfig(passphrase_count=3))
        assert len(passphrases) == 3
        assert generator.generate_one(GenerationConfig()).word_count == 3

    def test_builtin_dictionary_default_run(self):
        dictionary = load_dictionary()
        passphrases = generate_passphrases(GenerationConfig(passphrase_count=5), dictionary)
        assert len(passphrases) == 5
        for passphrase in passphrases:
            assert passphrase.word_count == 3
            assert all(word in dictionary for word in passphrase.words)


# =============================================================================
# Validation Tests
# =============================================================================

class TestValidation:
    def test_valid_config(self):
        result = validate_config(GenerationConfig())
        assert result.is_valid
        assert result.details["word_count_range"] == (3, 3)

    def test_inverted_words(self):
        result = validate_config(GenerationConfig(min_words=4, max_words=2))
        assert not result.is_valid
        assert "word count" in result.error_message

    def test_negative_values(self):
        assert not validate_config(GenerationConfig(min_words=-1)).is_valid
        assert not validate_config(GenerationConfig(max_len=-1)).is_valid
        assert not validate_config(GenerationConfig(passphrase_count=-1)).is_valid

    def test_length_min_above_unset_max(self):
        """max_len of zero means unbounded, so a larger min is fine."""
        assert validate_config(GenerationConfig(min_len=10, max_len=0)).is_valid

    def test_require_valid_config_raises(self):
        with pytest.raises(InvalidRangeError):
            require_valid_config(GenerationConfig(min_len=9, max_len=3))

    def test_validate_dictionary(self, small_dict, empty_dict):
        assert validate_dictionary(small_dict).details["size"] == 10
        assert not validate_dictionary(empty_dict).is_valid

    def test_require_valid_dictionary(self, small_dict, empty_dict):
        require_valid_dictionary(small_dict)
        with pytest.raises(EmptyDictionaryError) as exc_info:
            require_valid_dictionary(empty_dict)
        assert exc_info.value.dictionary_size == 0


# =============================================================================
# Entropy Tests
# =============================================================================

class TestEntropy:
    def test_known_method_bip39_sized(self):
        passphrase = Passphrase(words=("a", "b", "c"))
        assert analyze(passphrase, 2048).known_method == 33

    def test_brute_force_lowercase_twelve_chars(self):
        passphrase = Passphrase(words=("abcdef", "ghijkl"))
        assert passphrase.length == 12
        assert analyze(passphrase, 2048).brute_force_lowercase == 56

    def test_all_brute_force_estimates(self):
        report = analyze(Passphrase(words=("abcdefghijkl",)), 100)
        assert report.brute_force_mixed_case == math.floor(12 * math.log2(52))
        assert report.brute_force_alphanumeric == math.floor(12 * math.log2(62))
        assert report.brute_force_symbols == math.floor(12 * math.log2(82))

    def test_degenerate_inputs(self):
        assert known_method_entropy(3, 1) == 0
        assert known_method_entropy(3, 0) == 0
        assert known_method_entropy(0, 2048) == 0
        assert brute_force_entropy(0, 26) == 0

    def test_empty_passphrase(self):
        report = analyze(Passphrase(words=()), 2048)
        assert report.known_method == 0
        assert all(bits == 0 for bits in report.brute_force.values())

    def test_analyze_is_pure(self):
        passphrase = Passphrase(words=("river", "stone", "maple"))
        assert analyze(passphrase, 662) == analyze(passphrase, 662)

    def test_separator_counts_toward_length(self):
        spaced = Passphrase(words=("ab", "cd"), separator=" ")
        assert spaced.length == 5
        assert analyze(spaced, 10).brute_force_lowercase == brute_force_entropy(5, 26)

    def test_brute_force_covers_every_charset(self):
        report = analyze(Passphrase(words=("abcdefghijkl",)), 100)
        assert report.brute_force == {
            name: brute_force_entropy(12, size) for name, size in BRUTE_FORCE_CHARSETS.items()
        }

    def test_report_as_dict(self):
        data = analyze(Passphrase(words=("a", "b", "c")), 2048).as_dict()
        assert data["known_method"] == 33
        assert set(data["brute_force"]) == {"lowercase", "mixed_case", "alphanumeric", "symbols"}


class TestVersion:
    def test_version_string(self):
        assert __version__.count(".") == 2
