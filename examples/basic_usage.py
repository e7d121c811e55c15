#!/usr/bin/env python3
"""
Basic Phrasegen Usage Example

This example demonstrates how to generate passphrases and judge their
strength using the Phrasegen library.
"""

import phrasegen


def main():
    # The embedded default list; pass a path for your own word list
    dictionary = phrasegen.load_dictionary()

    stats = phrasegen.dictionary_stats(dictionary)
    print(f"Dictionary: {stats.word_count:,} words, {stats.bits_per_word:.2f} bits each")

    # 3-5 words, 16-28 characters, separated by dashes
    config = phrasegen.GenerationConfig(
        min_words=3,
        max_words=5,
        min_len=16,
        max_len=28,
        passphrase_count=3,
        separator="-",
    )

    # === GENERATE ===
    try:
        passphrases = phrasegen.generate_passphrases(config, dictionary)
    except phrasegen.LengthConstraintError as e:
        print(f"Could not satisfy length range: {e}")
        return

    # === ANALYZE ===
    for passphrase in passphrases:
        report = phrasegen.analyze(passphrase, len(dictionary))
        print(f"\n{passphrase.text}")
        print(f"  Known method: {report.known_method} bits")
        print(f"  Brute force (a-z): {report.brute_force_lowercase} bits")


if __name__ == "__main__":
    main()
