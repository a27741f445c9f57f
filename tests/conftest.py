"""Shared HTML fixtures shaped like a Google ``define`` results page."""

import sys
import textwrap
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


DEFINITION_SLOT = """
<div>
  <span data-dobid="hdw">serendipity</span>
  <span class="LTKOO"><span>/ˌserənˈdipədē/</span></span>
  <audio><source src="//ssl.gstatic.com/dictionary/static/sounds/serendipity.mp3"></audio>
</div>
<div>
  <div jsname="r5Nvmf">
    <span class="YrbPuc"><span>noun</span></span>
    <span class="LTKOO">/ˌserənˈdipədē/</span>
    <audio><source src="//ssl.gstatic.com/dictionary/static/sounds/serendipity_noun.mp3"></audio>
    <ol>
      <li>
        <div>
          <div data-dobid="dfn"><span>the occurrence of events by chance in a happy way.</span></div>
          <div>"a fortunate stroke of serendipity"</div>
          <div role="list">
            <div><span>h</span></div>
            <div><span>Similar:</span></div>
            <div><span>chance</span></div>
            <div><span>happy chance</span></div>
            <div><span style="cursor:text">fluke</span></div>
            <div><span>Opposite:</span></div>
            <div><span>misfortune</span></div>
          </div>
        </div>
        <div><div>Origin note without a gloss</div></div>
      </li>
      <li>
        <div>
          <div data-dobid="dfn"><span>a lucky find.</span></div>
        </div>
      </li>
    </ol>
  </div>
  <div jsname="r5Nvmf">
    <span class="YrbPuc"><span>adjective</span></span>
    <ol><li><div><div data-dobid="dfn"></div></div></li></ol>
  </div>
</div>
"""


def build_results_page(slot_contents):
    """Wrap slot bodies in the #center_col / .lr_container scaffolding."""
    slots = "\n".join(f'<div jsslot="">{content}</div>' for content in slot_contents)
    return textwrap.dedent(
        f"""
        <html><body>
          <div id="center_col">
            <div class="lr_container">
              {slots}
            </div>
          </div>
        </body></html>
        """
    )


@pytest.fixture
def results_page_html():
    """Full page with the five slots the real panel renders"""
    return build_results_page([
        "<div>Dictionary</div>",
        "<input type='text' value='serendipity'>",
        DEFINITION_SLOT,
        "<div>Translations of serendipity</div>",
        "<div>Use over time for: serendipity</div>",
    ])


@pytest.fixture
def page_builder():
    return build_results_page
