"""TranslationIndex Example - Locale Fallback Chains.

Demonstrates handling incomplete translations with fallback chains.

Scenarios covered:
1. Partial Latvian translations falling back to English
2. Static per-locale chains for the Baltic states
3. Per-call fallbacks with views
4. Observing fallbacks with on_fallback
5. Default locale from the environment

Python 3.13+.
"""

from __future__ import annotations

import os

from transdex import FallbackInfo, IndexConfig, MemoryBackend, TranslationIndex


def example_1_basic_fallback() -> None:
    """Example 1: Basic fallback (lv -> en-US default)."""
    print("=" * 60)
    print("Example 1: Basic Fallback (lv -> en-US)")
    print("=" * 60)

    backend = MemoryBackend(
        {
            "lv": {"welcome": "Sveiki, {0}!", "cart": "Grozs"},
            "en-US": {
                "welcome": "Welcome, {0}!",
                "cart": "Cart",
                "checkout": "Checkout",
                "order": {"confirmed": "Order {0} confirmed"},
            },
        }
    )
    index = TranslationIndex(backend)

    print(index.translate("lv", "welcome", "Anna"))
    # Output: Sveiki, Anna!

    print(index.translate("lv", "checkout"))
    # Output: Checkout

    print(index.translate("lv", "order.confirmed", "#1042"))
    # Output: Order #1042 confirmed


def example_2_static_chains() -> None:
    """Example 2: Static chains configured once per index."""
    print("\n" + "=" * 60)
    print("Example 2: Static Chains (et -> lv -> lt -> en-US)")
    print("=" * 60)

    backend = MemoryBackend(
        {
            "lt": {"shipping": "Pristatymas"},
            "lv": {"payment": "Maksājums"},
            "en-US": {"shipping": "Shipping", "payment": "Payment", "help": "Help"},
        }
    )
    config = IndexConfig(fallback_locales={"et": ["lv", "lt"]})
    index = TranslationIndex(backend, config=config)

    for key in ("payment", "shipping", "help"):
        print(f"{key}: {index.translate('et', key)}")
    # Output:
    # payment: Maksājums
    # shipping: Pristatymas
    # help: Help


def example_3_view_fallbacks() -> None:
    """Example 3: Per-call fallbacks and defaults through views."""
    print("\n" + "=" * 60)
    print("Example 3: View Fallbacks")
    print("=" * 60)

    backend = MemoryBackend(
        {
            "pt-PT": {"menu": {"title": "Ementa"}},
            "en-US": {"menu": {"title": "Menu"}},
        }
    )
    index = TranslationIndex(backend)

    brazilian = index.fallbacks("pt-PT")
    print(brazilian.translate("pt-BR", "menu.title"))
    # Output: Ementa

    print(brazilian.scope("menu").default("Special").translate("pt-BR", "special"))
    # Output: Special

    print(backend.get("pt-BR", "menu.special"))
    # Output: Special


def example_4_observing_fallbacks() -> None:
    """Example 4: Reporting translations served from another locale."""
    print("\n" + "=" * 60)
    print("Example 4: on_fallback")
    print("=" * 60)

    def report(info: FallbackInfo) -> None:
        print(
            f"  [{info.source}] {info.key}: requested {info.requested_locale}, "
            f"served {info.resolved_locale}"
        )

    backend = MemoryBackend({"en-US": {"title": "Dashboard"}})
    index = TranslationIndex(backend, on_fallback=report)

    print(index.translate("ja", "title"))
    # Output:
    #   [default_locale] title: requested ja, served en-US
    # Dashboard


def example_5_environment_default() -> None:
    """Example 5: Default locale from TRANSDEX_DEFAULT_LOCALE."""
    print("\n" + "=" * 60)
    print("Example 5: Environment Default Locale")
    print("=" * 60)

    os.environ["TRANSDEX_DEFAULT_LOCALE"] = "de-DE"
    try:
        config = IndexConfig.from_env()
    finally:
        del os.environ["TRANSDEX_DEFAULT_LOCALE"]

    backend = MemoryBackend({"de-DE": {"title": "Übersicht"}})
    index = TranslationIndex(backend, config=config)

    print(index.translate("", "title"))
    # Output: Übersicht


if __name__ == "__main__":
    example_1_basic_fallback()
    example_2_static_chains()
    example_3_view_fallbacks()
    example_4_observing_fallbacks()
    example_5_environment_default()
