"""
Custom Dataset Example

Register in-memory subdivision data, or point the shared dataset at a
directory of <ALPHA2>.yaml files, and plug in a different humanizer.
"""
from countrykit import Country, SubdivisionDataset, set_default_dataset, set_default_humanizer


def main():
    dataset = SubdivisionDataset()
    dataset.register(
        "CH",
        {
            "ZH": {"name": "Zürich", "type": "canton", "translations": {"fr": "Zurich"}},
            "GE": {"name": "Genève", "type": "canton", "translations": {"de": "Genf"}},
        },
    )
    set_default_dataset(dataset)

    # Title-case every word instead of only the first
    set_default_humanizer(lambda s: s.replace("_", " ").title())

    ch = Country("CH")
    print(ch.subdivision_names("de"))
    print(ch.find_subdivision_by_name("Genf"))
    print(ch.humanized_subdivision_types())

    # Data embedded on the country takes precedence over the dataset
    li = Country("LI", {"subdivisions": {"01": {"name": "Balzers", "type": "commune"}}})
    print(li.subdivision_names())


if __name__ == "__main__":
    main()
