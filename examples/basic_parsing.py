"""
Example: Basic parsing

Demonstrates splitting URLs and hostnames into root domain, TLD,
second-level domain and subdomain.

Run with a local copy of the Public Suffix List:
```bash
curl -o public_suffix_list.dat https://publicsuffix.org/list/public_suffix_list.dat
uv run python examples/basic_parsing.py public_suffix_list.dat
```
"""

import logging
import sys

from tld_extract import TLDExtract

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

SAMPLES = [
    "https://www.github.com/gumob/TLDExtract",
    "http://forums.news.cnn.com/",
    "shop.example.co.uk/cart?item=1",
    "www.ラーメン.寿司.co.jp",
    "//cdn.example.com/lib.js",
    "co.jp",
    "localhost",
    "not a url at all",
]


def main():
    """Parse a handful of sample inputs."""
    if len(sys.argv) != 2:
        print("usage: basic_parsing.py PATH_TO_PSL")
        return

    extractor = TLDExtract.from_file(sys.argv[1])

    print("=" * 80)
    print(f"{'input':<42} {'root':<18} {'tld':<8} {'sld':<8} sub")
    print("=" * 80)
    for value in SAMPLES:
        result = extractor.parse(value)
        if result is None:
            print(f"{value:<42} (no match)")
            continue
        print(
            f"{value:<42} {result.root_domain or '-':<18} "
            f"{result.top_level_domain or '-':<8} "
            f"{result.second_level_domain or '-':<8} {result.sub_domain or '-'}"
        )


if __name__ == "__main__":
    main()
