import html

from pokeapi_client import capitalize_name

TYPE_COLORS = {
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "electric": "#F7D02C",
    "grass": "#7AC74C",
    "ice": "#96D9D6",
    "fighting": "#C22E28",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "flying": "#A98FF3",
    "psychic": "#F95587",
    "bug": "#A6B91A",
    "rock": "#B6A136",
    "ghost": "#735797",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "steel": "#B7B7CE",
    "fairy": "#D685AD",
}
FALLBACK_COLOR = "#777777"


def _xp_label(experience):
    return f"XP {experience}" if experience is not None else "XP ?"


def type_badges_html(primary, secondary=None, fullscreen=False):
    """Badge markup for the primary type and, if present, the secondary one."""
    suffix = '-fs' if fullscreen else ''
    markup = (
        f'<div class="first-type{suffix}"><h4>{html.escape(primary)}</h4></div>'
    )
    if secondary:
        markup += (
            f'<div class="second-type{suffix}"><h4>{html.escape(secondary)}</h4></div>'
        )
    return markup


def card_html(index, record, badges=''):
    image = html.escape(record.image_url or '', quote=True)
    return (
        f'<div id="pokemon{index}" class="cards bg-{html.escape(record.primary_type)}">'
        f'<div class="card-number">'
        f'<div class="pokemon-id"><h5>{index}</h5></div>'
        f'<div class="margin-left-auto"><h5>{_xp_label(record.experience)}</h5></div>'
        f'</div>'
        f'<h2 id="pokemonName{index}">{html.escape(capitalize_name(record.name))}</h2>'
        f'<div class="imagebox"><img src="{image}" alt=""></div>'
        f'<div id="cardType{index}" class="card-type">{badges}</div>'
        f'</div>'
    )


def fullscreen_html(index, record):
    """Header of the detail view: id, xp, name, image, type badges and measurements."""
    image = html.escape(record.image_url or '', quote=True)
    badges = type_badges_html(record.primary_type, record.secondary_type, fullscreen=True)
    return (
        f'<div class="card-fullscreen bg-{html.escape(record.primary_type)}">'
        f'<div class="card-number card-number-fs">'
        f'<div class="pokemon-id pokemon-id-fs"><h5 class="h5-fs">{index}</h5></div>'
        f'<div class="margin-left-auto"><h5 class="h5-fs">{_xp_label(record.experience)}</h5></div>'
        f'</div>'
        f'<h2>{html.escape(capitalize_name(record.name))}</h2>'
        f'<div class="imagebox imagebox-fs"><img src="{image}" alt=""></div>'
        f'<div id="cardTypeFullscreen{index}" class="card-type">{badges}</div>'
        f'<div class="measurements">'
        f'<span>Height {record.height_m:g} m</span>'
        f'<span>Weight {record.weight_kg:g} kg</span>'
        f'</div>'
        f'</div>'
    )


class CardRenderer:
    """Turns records into card markup and hands it to the page container."""

    def __init__(self, sink):
        self.sink = sink

    def render(self, index, record):
        badges = type_badges_html(record.primary_type, record.secondary_type)
        self.sink(index, card_html(index, record, badges))


def cards_css(dark=False):
    background = '#1e1e1e' if dark else '#ffffff'
    text = '#f0f0f0' if dark else '#2c2c2c'
    rules = [
        f".stApp {{ background-color: {background}; color: {text}; }}",
        ".cards, .card-fullscreen { border-radius: 16px; padding: 12px; color: #ffffff;"
        " display: flex; flex-direction: column; margin-bottom: 8px; }",
        ".card-number { display: flex; align-items: center; }",
        ".margin-left-auto { margin-left: auto; }",
        ".imagebox { display: flex; justify-content: center; }",
        ".imagebox img { width: 120px; height: 120px; object-fit: contain; }",
        ".imagebox-fs img { width: 200px; height: 200px; }",
        ".card-type { display: flex; gap: 8px; justify-content: center; }",
        ".first-type, .second-type, .first-type-fs, .second-type-fs {"
        " background: rgba(255, 255, 255, 0.25); border-radius: 12px; padding: 0 12px; }",
        ".measurements { display: flex; justify-content: space-around; }",
    ]
    for type_name, color in TYPE_COLORS.items():
        rules.append(f".bg-{type_name} {{ background-color: {color}; }}")
    return "<style>\n" + "\n".join(rules) + "\n</style>"
