"""Whole-document properties of the slim transform over a varied corpus."""

import pytest

from htmlslim import slim

# Markup as it is found in the wild: uppercase names, unquoted and
# single-quoted attributes, implied end tags, doctypes in either case.
WILD_DOCUMENTS = [
    "<!DOCTYPE html><p>x</p>",
    "<!DOCTYPE html>\n<html></html>",
    "<!doctype html>\n<html>\n  <body>\n    <p>hi</p>\n  </body>\n</html>\n",
    "<svg viewBox='0 0 10 10'><![CDATA[x < y]]><path d='M0 0'/></svg>",
    "<?php echo 1 ?><p>a</p>",
    "<p>a &nbsp; b &copy; &#8212; c</p>",
    "<pre>\n  a\n\n    b  \n  </pre>\n<textarea>  x\n\n  y  </textarea>",
    "<ul>\n  <li>one\n  <li>two\n</ul>",
    "<table><tr><td>1<td>2</table>",
    "<a title='say \"hi\"' data-x=\"it's\">q</a><b title=\"both &quot;x&quot; 'y'\">z</b>",
    "<div>\n  a <!-- c -->  b\n  <span> </span>\n</div>",
    "\n\n   <p>lead</p>",
    "<DIV CLASS=x ONCLICK=go()>unclosed <b>bold</div></span>",
    "<script>if (a < b) {}\n\n</script><style>\n  p { }\n</style><link rel=stylesheet href=a.css>",
    '<script type="application/ld+json">{"a": 1}</script><template><p>t</p></template>',
]

# Markup already in the form the serializer writes, so a pass that removes
# nothing and keeps whitespace must give it back byte for byte.
CANONICAL_DOCUMENTS = [
    "<!DOCTYPE html><p>x</p>",
    "<!DOCTYPE html>\n<html></html>",
    '<!DOCTYPE html>\n<html lang="en">\n  <body>\n    <p>hi</p>\n  </body>\n</html>\n',
    "<?php echo 1 ?>\n<p>a</p>",
    "<p>a&nbsp;b &amp; c &lt; d</p>",
    "<pre>\n  a\n\n    b  \n  </pre>",
    "<textarea>  x\n\n  y  </textarea>",
    "<ul>\n  <li>one</li>\n  <li>two</li>\n</ul>",
    '<svg viewbox="0 0 10 10"><path d="M0 0"></path></svg>',
    "<a title='say \"hi\"' data-x=\"it's\">q</a>",
    "<div>\n  a <!-- c -->  b\n</div>",
    '<input type="checkbox" checked><br>',
]

OPTION_SETS = [
    pytest.param({}, id="defaults"),
    pytest.param({"space": False}, id="keep-space"),
    pytest.param({"script": True, "style": True, "ld_json": True, "template": True}, id="strip-all"),
    pytest.param({"space": False, "comment": False, "attr": "^data-"}, id="keep-space-comments"),
]


class TestIdempotence:
    """Slimming an already slimmed document changes nothing."""

    @pytest.mark.parametrize("options", OPTION_SETS)
    @pytest.mark.parametrize("html", WILD_DOCUMENTS + CANONICAL_DOCUMENTS)
    def test_second_pass_is_identity(self, html, options):
        """Test that a second pass returns the first pass unchanged."""
        strip = slim(**options)
        once = strip(html)
        assert strip(once) == once


class TestKeepSpace:
    """With whitespace collapsing off, only requested removals change output."""

    @pytest.mark.parametrize("html", CANONICAL_DOCUMENTS)
    def test_output_equals_input(self, html):
        """Test that serializer-form markup round-trips byte for byte."""
        assert slim(space=False, comment=False)(html) == html

    @pytest.mark.parametrize("html", WILD_DOCUMENTS)
    def test_output_is_fixed_point(self, html):
        """Test that normalized wild markup then round-trips unchanged."""
        strip = slim(space=False, comment=False)
        assert strip(strip(html)) == strip(html)

    def test_only_requested_removals(self):
        """Test that removing comments leaves surrounding whitespace alone."""
        html = "<!DOCTYPE html>\n<div>\n  a <!-- c -->  b\n</div>"
        assert slim(space=False)(html) == "<!DOCTYPE html>\n<div>\n  a   b\n</div>"
