"""
Example 1: Localized blasting inside a LangGraph node

Shows how to resolve a localization key with an injected localizer and
blast the result with a config-driven delimiter, directly and as a node.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from blasttext.config.loader import load_config
from blasttext.providers.catalog_localizer import load_catalog
from blasttext.runtime.blast_text import BlastText
from blasttext.segmenters.blast import BlastSegmenter
from blasttext.adapters.langgraph.nodes import make_blast_node
from blasttext.adapters.langgraph.state_keys import TEXT, BLAST_SEGMENTS
from blasttext.examples.utils import SimpleConsoleLogger

def main():
    print("💥 BlastText Localized Example")
    print("=" * 40)

    here = Path(__file__).parent
    config = load_config(here / "blast.yaml")
    localizer = load_catalog(here / "catalog.yaml", default_locale=config.locale)
    logger = SimpleConsoleLogger()

    rule = config.to_rule()
    node = make_blast_node(BlastSegmenter(rule, logger=logger))

    for locale in ("de_DE", "en_US", "fr_FR"):
        print(f"\n🌐 Locale: {locale}")

        # Direct component usage
        blasted = BlastText.localized("greeting", localizer, locale=locale,
                                      delimiter=rule, logger=logger)
        for segment in blasted:
            print(f"   [{segment.index}] {segment.value!r} ({segment.start}:{segment.end})")

        # LangGraph node usage example
        state = {TEXT: localizer.localize("greeting", locale)}
        print(f"🎯 Node result: {node.invoke(state)[BLAST_SEGMENTS]}")

if __name__ == "__main__":
    main()
