# tests/test_outline.py
from h5dumpview.core.folding import scan_folds
from h5dumpview.core.outline import build_outline, render_outline


def test_outline_structure(sample_dump):
    roots = build_outline(sample_dump)

    assert [e.label for e in roots] == ["HDF5 sample.h5"]
    (root_group,) = roots[0].children
    assert (root_group.kind, root_group.name) == ("GROUP", "/")

    attribute, grid = root_group.children
    assert attribute.label == "ATTRIBUTE title"
    assert [c.label for c in attribute.children] == ["DATATYPE H5T_STRING", "DATA"]

    assert grid.label == "GROUP grid"
    dataset, link = grid.children
    assert dataset.label == "DATASET temperature"
    assert [c.label for c in dataset.children] == ["DATASPACE SIMPLE", "DATA"]
    assert link.label == "SOFTLINK latest"


def test_outline_reuses_fold_scan():
    text = 'GROUP "/" {DATASET "x" {DATA {1 2 3}}}'
    scan = scan_folds(text)
    (group,) = build_outline(text, scan)

    assert group.region is scan.regions[0]
    assert group.children[0].children[0].region is scan.regions[2]


def test_non_keyword_blocks_are_skipped():
    text = (
        'DATASET "pairs" {\n'
        "   DATA {\n"
        "   (0): {\n"
        '      ATTRIBUTE "odd" { }\n'
        "   }\n"
        "   }\n"
        "}\n"
    )
    (dataset,) = build_outline(text)
    (data,) = dataset.children
    # The "(0): {" row has no keyword header; its child attaches to DATA
    assert [c.label for c in data.children] == ["ATTRIBUTE odd"]


def test_outline_with_unterminated_block():
    (group,) = build_outline('GROUP "/" { DATASET "d" {')
    assert group.region.close_offset is None
    assert group.children[0].label == "DATASET d"


def test_outline_empty_without_braces():
    assert build_outline('DATASET "x"') == []


def test_render_outline(sample_dump):
    rendered = render_outline(build_outline(sample_dump), "sample")
    assert rendered == (
        "sample/\n"
        "└── HDF5 sample.h5\n"
        "    └── GROUP /\n"
        "        ├── ATTRIBUTE title\n"
        "        │   ├── DATATYPE H5T_STRING\n"
        "        │   └── DATA\n"
        "        └── GROUP grid\n"
        "            ├── DATASET temperature\n"
        "            │   ├── DATASPACE SIMPLE\n"
        "            │   └── DATA\n"
        "            └── SOFTLINK latest\n"
    )
