#!/usr/bin/env python3
"""
BlastText Demo - Shows how one text is blasted by each delimiter rule.
Demonstrates config loading, localized content and custom patterns.
"""

import sys
from pathlib import Path

# Add src to path so we can import blasttext
sys.path.insert(0, str(Path(__file__).parent / "src"))

from blasttext import ALL, CHARACTER, SENTENCE, WORD, BlastText, DelimiterRule, InvalidPatternError
from blasttext.config.loader import load_config, ConfigLoadError
from blasttext.examples.utils import SimpleConsoleLogger, create_localizer_with_fallback

DEMO_TEXT = "Lorem ipsum dolor sit amet, voluptua. At et ea rebum."
EXAMPLE_DIR = Path(__file__).parent / "examples" / "01_localized_blast"

def show(blasted: BlastText):
    values = blasted.values
    print(f"   {len(values)} segments: {values}")

def run_demo():
    """Run the BlastText demo."""
    print("💥 BlastText Demo - Delimiter Rules")
    print("=" * 50)

    try:
        for rule in (ALL, CHARACTER, WORD, SENTENCE, DelimiterRule.custom(r"(um)")):
            print(f"\n🧪 Delimiter: {rule}")
            show(BlastText(DEMO_TEXT, rule))

        # Config-driven rule
        config_path = EXAMPLE_DIR / "blast.yaml"
        print(f"\n📋 Loading config from {config_path.name}...")
        config = load_config(config_path)
        print(f"✅ Delimiter: {config.to_rule()}, locale: {config.locale or 'process default'}")

        # Localized content
        localizer = create_localizer_with_fallback(catalog_path=EXAMPLE_DIR / "catalog.yaml")
        logger = SimpleConsoleLogger()
        for key in ("greeting", "missing_key"):
            print(f"\n🌐 Key: {key}")
            show(BlastText.localized(key, localizer, locale=config.locale,
                                     delimiter=config.to_rule(), logger=logger))

        # Invalid custom patterns stop immediately
        print("\n🧪 Delimiter: custom('(unclosed')")
        try:
            BlastText(DEMO_TEXT, DelimiterRule.custom("(unclosed")).values
        except InvalidPatternError as e:
            print(f"   ❌ {e}")

        print("\n🎉 Demo completed successfully!")

    except ConfigLoadError as e:
        print(f"❌ Demo failed: {e}")
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(run_demo())
