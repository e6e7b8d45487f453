from html import escape
from typing import List

from featuregen.schemas import FeatureDescriptor
from featuregen.ui.board import BoardSnapshot, BoardState


TITLE = "Project Feature Generator"
TEXTAREA_PLACEHOLDER = "Enter your project requirements here..."
BUTTON_IDLE = "Generate Components"
BUTTON_LOADING = "Generating Components..."
LOADING_MESSAGE = "Generating components..."
EMPTY_MESSAGE = "Enter your project requirements to generate components"
# Reload from GET / until the latest submission settles
LOADING_REFRESH = '<meta http-equiv="refresh" content="2;url=/">'

STYLE = """
body { margin: 0; font-family: system-ui, sans-serif; background: #f3f4f6; }
main { max-width: 72rem; margin: 0 auto; padding: 2rem; }
h1 { text-align: center; }
.panel, .card { background: #fff; border-radius: .5rem; box-shadow: 0 1px 3px rgba(0,0,0,.1); padding: 1.5rem; }
.panel { margin-bottom: 2rem; }
textarea { width: 100%; min-height: 100px; box-sizing: border-box; padding: .5rem 1rem; }
button { width: 100%; margin-top: 1rem; padding: .75rem; font-weight: bold; color: #fff; background: #3b82f6; border: 0; border-radius: .375rem; }
button:disabled { opacity: .6; }
.grid { display: grid; grid-template-columns: 1fr; gap: 1.5rem; }
@media (min-width: 768px) { .grid { grid-template-columns: repeat(2, 1fr); } }
@media (min-width: 1024px) { .grid { grid-template-columns: repeat(3, 1fr); } }
.card h3 { display: inline; color: #2563eb; }
.badge { display: inline-block; font-size: .8rem; padding: .1rem .5rem; border-radius: .25rem; background: #dbeafe; }
.priority-high { background: #fee2e2; }
.priority-low { background: #dcfce7; }
.status { text-align: center; color: #6b7280; padding: 2.5rem 0; }
.spinner { width: 3rem; height: 3rem; margin: 0 auto; border-radius: 50%; border-bottom: 2px solid #3b82f6; animation: spin 1s linear infinite; }
@keyframes spin { to { transform: rotate(360deg); } }
"""

# Disable the button as soon as the form is submitted, before the reply page arrives
SUBMIT_SCRIPT = """
document.getElementById("feature-form").addEventListener("submit", function () {
  var button = document.getElementById("generate-button");
  button.disabled = true;
  button.textContent = "%s";
});
""" % BUTTON_LOADING


def _list_section(title: str, items: List[str]) -> str:
    if not items:
        return ""
    rows = "".join(f"<li>{escape(item)}</li>" for item in items)
    return (
        '<div class="section">'
        f"<h4>{escape(title)}:</h4>"
        f"<ul>{rows}</ul>"
        "</div>"
    )


def render_card(feature: FeatureDescriptor) -> str:
    badge = ""
    if feature.priority:
        badge = (
            f' <span class="badge priority-{feature.priority}">'
            f"{escape(feature.priority)}</span>"
        )

    return (
        '<div class="card">'
        "<div>"
        '<input type="checkbox">'
        f" <h3>{escape(feature.name)}</h3>{badge}"
        "</div>"
        f"<p>{escape(feature.description)}</p>"
        + _list_section("User Stories", feature.user_stories)
        + _list_section("Technical Details", feature.technical_details)
        + "</div>"
    )


def render_results(snapshot: BoardSnapshot) -> str:
    if snapshot.state is BoardState.LOADING:
        return (
            '<div class="status">'
            '<div class="spinner"></div>'
            f"<p>{LOADING_MESSAGE}</p>"
            "</div>"
        )

    if snapshot.features:
        cards = "".join(render_card(f) for f in snapshot.features)
        return f'<div class="grid">{cards}</div>'

    return f'<p class="status">{EMPTY_MESSAGE}</p>'


def render_form(snapshot: BoardSnapshot) -> str:
    disabled = "" if snapshot.submit_enabled else " disabled"
    label = BUTTON_IDLE if snapshot.submit_enabled else BUTTON_LOADING
    return (
        '<div class="panel">'
        '<form id="feature-form" method="post" action="/generate">'
        f'<textarea name="requirements" placeholder="{TEXTAREA_PLACEHOLDER}">'
        f"{escape(snapshot.requirements)}</textarea>"
        f'<button id="generate-button" type="submit"{disabled}>{label}</button>'
        "</form>"
        "</div>"
    )


def render_page(snapshot: BoardSnapshot) -> str:
    refresh = LOADING_REFRESH if snapshot.state is BoardState.LOADING else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
{refresh}
<title>{TITLE}</title>
<style>{STYLE}</style>
</head>
<body>
<main>
<h1>{TITLE}</h1>
{render_form(snapshot)}
{render_results(snapshot)}
</main>
<script>{SUBMIT_SCRIPT}</script>
</body>
</html>
"""
