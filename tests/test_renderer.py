import sys
import pathlib

# Add project root to path for testing
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import sandblast.renderer as renderer
from sandblast.element import GAP, TEXTBLOCK, Leaf, Transient, debug_string
from sandblast.options import ExtractOptions
from sandblast.text import LINK_END

def block(content, hrefs=None):
    return Leaf(TEXTBLOCK, content, hrefs=list(hrefs or []))

LINKED = block(f"Read the docs{LINK_END} and the faq{LINK_END} please ", ["/docs", "/faq"])

def test_paragraphs():
    assert renderer.render(Transient([block("One "), block(" Two")])) == "One\nTwo"

def test_gaps_become_one_blank_line():
    tree = Transient([GAP, block("A"), GAP, GAP, block("B"), GAP])
    assert renderer.render(tree) == "A\n\nB"

def test_single_leaf():
    assert renderer.render(block("  lonely  ")) == "lonely"
    assert renderer.render(None) == ""

def test_links_dropped_by_default():
    assert renderer.render(Transient([LINKED])) == "Read the docs and the faq please"

def test_keep_links_footnotes():
    out = renderer.render(Transient([LINKED]), ExtractOptions(keep_links=True))
    assert out == "Read the docs[1] and the faq[2] please\n\n[1] /docs\n[2] /faq"

def test_numbering_continues_across_leaves():
    tree = Transient([block(f"first{LINK_END}", ["/1"]), block(f"second{LINK_END}", ["/2"])])
    out = renderer.render(tree, ExtractOptions(keep_links=True))
    assert out == "first[1]\nsecond[2]\n\n[1] /1\n[2] /2"

def test_marker_mismatch_reported():
    out = renderer.render(Transient([block(f"one{LINK_END} two")]))
    assert out == "one two\n[sandblast: link marker mismatch: 1 markers, 0 hrefs]"

def test_render_does_not_mutate():
    tree = Transient([LINKED.clone()])
    before = debug_string(tree)
    renderer.render(tree, ExtractOptions(keep_links=True))
    assert debug_string(tree) == before

def test_debug_string():
    tree = Transient([Leaf(TEXTBLOCK, f"docs{LINK_END}", link_part=1.0, hrefs=["/d"]), GAP, GAP])
    dump = debug_string(tree)
    assert dump.splitlines()[0] == "<~transient>[3]"
    assert "   <~textblock:1>[docs[/a](4)] {/d}" in dump
    assert dump.count("<gap>") == 2

if __name__ == "__main__":
    test_paragraphs()
    test_gaps_become_one_blank_line()
    test_single_leaf()
    test_links_dropped_by_default()
    test_keep_links_footnotes()
    test_numbering_continues_across_leaves()
    test_marker_mismatch_reported()
    test_render_does_not_mutate()
    test_debug_string()
    print("test_renderer.py passed")
