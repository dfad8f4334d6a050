"""
Basic Subdivision Lookup Example

Simple example showing how to query subdivisions of a country.
"""
from countrykit import Country


def main():
    us = Country("US")

    print(f"{us.alpha2} has {len(us.subdivisions)} subdivisions")
    print(f"Types: {', '.join(us.humanized_subdivision_types())}")

    # Lookup by code, name or translated name
    for query in ("TX", "California", "Porto Rico", "Atlantis"):
        subdivision = us.find_subdivision_by_name(query)
        print(f"{query!r} -> {subdivision.code if subdivision else 'not found'}")

    # Names in French, falling back to English where no translation exists
    for name, code in us.subdivision_names_with_codes("fr")[:10]:
        print(f"  {code}: {name}")


if __name__ == "__main__":
    main()
