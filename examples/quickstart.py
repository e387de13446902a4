"""Quickstart example for transdex.

Demonstrates basic usage: loading YAML translations, scoped lookups, default
values for missing keys, and argument formatting.

Note: The YAML backend is read-only. Missing keys are only remembered when a
writable backend (MemoryBackend here) is configured first.
"""

import tempfile
from datetime import date
from pathlib import Path

from transdex import MemoryBackend, TranslationIndex, YamlBackend

with tempfile.TemporaryDirectory() as tmpdir:
    locales = Path(tmpdir)
    (locales / "en.yml").write_text(
        """
en-US:
  hello: Hello, World!
  greeting: Hello, {0}!
  user:
    info: "{first} {last} (Age: {age})"
  emails: "You have {count, plural, =0 {no emails} one {one email} other {# emails}}."
  released: "Released on {0, date, long}"
""",
        encoding="utf-8",
    )
    (locales / "de.yml").write_text(
        """
de-DE:
  hello: Hallo, Welt!
  emails: "Sie haben {count, plural, one {eine E-Mail} other {# E-Mails}}."
""",
        encoding="utf-8",
    )

    writable = MemoryBackend(name="runtime")
    index = TranslationIndex(writable, YamlBackend(locales))

# Example 1: Simple lookup
print("=" * 50)
print("Example 1: Simple Lookup")
print("=" * 50)

print(index.translate("en-US", "hello"))
# Output: Hello, World!

print(index.translate("de-DE", "hello"))
# Output: Hallo, Welt!

# Example 2: Arguments
print("\n" + "=" * 50)
print("Example 2: Positional and Keyword Arguments")
print("=" * 50)

print(index.translate("en-US", "greeting", "Alice"))
# Output: Hello, Alice!

print(index.translate("en-US", "user.info", first="Bob", last="Smith", age=30))
# Output: Bob Smith (Age: 30)

# Example 3: Plurals
print("\n" + "=" * 50)
print("Example 3: Plural Forms")
print("=" * 50)

for count in (0, 1, 5, 1234):
    print(index.translate("en-US", "emails", count=count))
# Output:
# You have no emails.
# You have one email.
# You have 5 emails.
# You have 1,234 emails.

print(index.translate("de-DE", "emails", count=1234))
# Output: Sie haben 1.234 E-Mails.

# Example 4: Dates
print("\n" + "=" * 50)
print("Example 4: Dates")
print("=" * 50)

print(index.translate("en-US", "released", date(2026, 10, 18)))
# Output: Released on October 18, 2026

# Example 5: Fallback to the default locale
print("\n" + "=" * 50)
print("Example 5: Default Locale Fallback")
print("=" * 50)

print(index.translate("fr-FR", "greeting", "Claire"))
# Output: Hello, Claire!  (fr-FR has no translations; en-US is the default)

# Example 6: Missing keys and defaults
print("\n" + "=" * 50)
print("Example 6: Missing Keys")
print("=" * 50)

print(index.translate("en-US", "farewell"))
# Output: farewell  (the key itself; an empty entry is now stored)

view = index.scope("user").default("Anonymous")
print(view.translate("en-US", "nickname"))
# Output: Anonymous

print(writable.get("en-US", "user.nickname"))
# Output: Anonymous  (persisted under the scoped key)

# Example 7: Cache statistics
print("\n" + "=" * 50)
print("Example 7: Cache Statistics")
print("=" * 50)

print(index.get_load_summary())
print(index.cache_store.get_stats())
