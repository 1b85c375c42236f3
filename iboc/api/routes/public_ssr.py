"""
Public SSR Routes - Server-side rendered pages of the church site.

Pages: home, about, social action gallery, contact and the leaders' login.
Every piece of stored text is escaped before it reaches the markup.
"""

import random
from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from iboc.adapters.sqlite.repos import SQLiteSiteContentRepo, SQLiteSocialProjectRepo
from iboc.api.deps import get_rules, get_site_content_repo, get_social_project_repo
from iboc.api.routes.public import public_projects
from iboc.components.site_content import load_content
from iboc.domain.defaults import LOGIN_VERSES
from iboc.domain.entities import SiteContent, SocialProject, SocialProjectItem
from iboc.domain.formatting import format_date
from iboc.rules.models import ChurchRules, Rules

router = APIRouter()

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="

NAV_LINKS = [
    ("/", "Início"),
    ("/sobre", "Quem Somos"),
    ("/acao-social", "Ação Social"),
    ("/contato", "Contato"),
    ("/entrar", "Área de Líderes"),
]


# --- HTML Rendering ---


def _escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def maps_url(address: str) -> str:
    return MAPS_SEARCH_URL + quote(address, safe="")


def render_page(church: ChurchRules, title: str, body_content: str) -> str:
    nav = "".join(f'<a href="{href}">{_escape_html(label)}</a>' for href, label in NAV_LINKS)
    page_title = f"{title} | {church.short_name}" if title else church.name
    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{_escape_html(page_title)}</title>
</head>
<body>
    <header>
        <strong>{_escape_html(church.name)}</strong>
        <nav>{nav}</nav>
    </header>
    <main>
    {body_content}
    </main>
    <footer>
        <p>Domingo: 18h00 - Celebração</p>
        <p>Terça: 19h30 - Escola Bíblica</p>
        <p>Quinta: 19h30 - Culto de Doutrina</p>
        <p>{_escape_html(church.address)}</p>
        <p>Soli Deo Gloria</p>
    </footer>
</body>
</html>"""


def render_gallery(items: list[SocialProjectItem]) -> str:
    figures = []
    for item in items:
        figures.append(
            f"""<figure>
            <img src="{_escape_html(item.image_url)}" alt="" loading="lazy" />
            <figcaption>"{_escape_html(item.verse)}" <cite>{_escape_html(item.verse_reference)}</cite></figcaption>
        </figure>"""
        )
    return f'<div class="gallery">{"".join(figures)}</div>' if figures else ""


def render_home(content: SiteContent, church: ChurchRules) -> str:
    hero_image = (
        f'<img src="{_escape_html(content.hero_image_url)}" alt="" />'
        if content.hero_image_url
        else ""
    )
    social = ""
    if content.social_project_title or content.social_project_items:
        social = f"""
    <section id="acao-social">
        <h2>{_escape_html(content.social_project_title or "Ação Social")}</h2>
        <p>{_escape_html(content.social_project_description or "")}</p>
        {render_gallery(content.social_project_items)}
        <a href="/acao-social">Ver todos os projetos</a>
    </section>"""

    live_link = content.youtube_live_link or church.youtube_channel
    return f"""
    <section id="hero">
        {hero_image}
        <h1>{_escape_html(content.hero_title)}</h1>
        <p>{_escape_html(content.hero_subtitle)}</p>
        <a href="/sobre">{_escape_html(content.hero_button_text)}</a>
    </section>
    <section id="proximo-evento">
        <h2>Agenda Ministerial</h2>
        <h3>{_escape_html(content.next_event_title)}</h3>
        <p>{_escape_html(content.next_event_date)} às {_escape_html(content.next_event_time)}</p>
        <p>{_escape_html(content.next_event_location)}</p>
        <p>{_escape_html(content.next_event_description)}</p>
        <a href="{_escape_html(live_link)}">Assista ao vivo</a>
    </section>{social}"""


def render_social_page(projects: list[SocialProject]) -> str:
    if not projects:
        return """
    <section>
        <h1>Ministério Social IBOC</h1>
        <p>Nossa história continua sendo escrita...</p>
    </section>"""

    sections = []
    for project in projects:
        location = f"<p>{_escape_html(project.location)}</p>" if project.location else ""
        sections.append(
            f"""
    <article>
        <h2>{_escape_html(project.title)}</h2>
        <p><time datetime="{project.date.isoformat()}">{format_date(project.date)}</time> · {_escape_html(project.status)}</p>
        {location}
        <p>{_escape_html(project.description)}</p>
        {render_gallery(project.gallery)}
    </article>"""
        )
    return f"""
    <section>
        <h1>Ministério Social IBOC</h1>
        {"".join(sections)}
    </section>"""


def render_about() -> str:
    return """
    <section>
        <span>Nossa Identidade</span>
        <h1>Quem Somos</h1>
        <p>Página em construção com Missão, Visão e Valores. Em breve contaremos nossa história completa.</p>
    </section>"""


def render_contact(church: ChurchRules) -> str:
    return f"""
    <section>
        <span>Fale Conosco</span>
        <h1>Contato &amp; Localização</h1>
        <h2>Endereço</h2>
        <p>{_escape_html(church.address)}</p>
        <a href="{_escape_html(maps_url(church.address))}" target="_blank" rel="noopener">Ver no mapa</a>
        <h2>Canais de Atendimento</h2>
        <p>Email: {_escape_html(church.email)}</p>
        <p>Tel: {_escape_html(church.phone)}</p>
        <blockquote>"Alegrei-me quando me disseram: Vamos à casa do Senhor." <cite>Salmos 122:1</cite></blockquote>
    </section>"""


def render_login(verse: tuple[str, str]) -> str:
    text, reference = verse
    return f"""
    <section>
        <span>Área de Líderes</span>
        <h1>Acesso ao Sistema</h1>
        <form method="post" action="/api/auth/login">
            <label>Usuário <input name="username" autocomplete="username" required /></label>
            <label>Senha <input name="password" type="password" autocomplete="current-password" required /></label>
            <button type="submit">Entrar</button>
        </form>
        <blockquote>"{_escape_html(text)}" <cite>{_escape_html(reference)}</cite></blockquote>
    </section>"""


# --- SSR Endpoints ---


@router.get("/", response_class=HTMLResponse, summary="Homepage SSR")
def ssr_homepage(
    repo: SQLiteSiteContentRepo = Depends(get_site_content_repo),
    rules: Rules = Depends(get_rules),
) -> HTMLResponse:
    content, _ = load_content(repo)
    return HTMLResponse(render_page(rules.church, "", render_home(content, rules.church)))


@router.get("/sobre", response_class=HTMLResponse, summary="About page SSR")
def ssr_about(rules: Rules = Depends(get_rules)) -> HTMLResponse:
    return HTMLResponse(render_page(rules.church, "Quem Somos", render_about()))


@router.get("/contato", response_class=HTMLResponse, summary="Contact page SSR")
def ssr_contact(rules: Rules = Depends(get_rules)) -> HTMLResponse:
    return HTMLResponse(render_page(rules.church, "Contato", render_contact(rules.church)))


@router.get("/acao-social", response_class=HTMLResponse, summary="Social action page SSR")
def ssr_social(
    repo: SQLiteSocialProjectRepo = Depends(get_social_project_repo),
    rules: Rules = Depends(get_rules),
) -> HTMLResponse:
    body = render_social_page(public_projects(repo))
    return HTMLResponse(render_page(rules.church, "Ação Social", body))


@router.get("/entrar", response_class=HTMLResponse, summary="Leaders login page")
def ssr_login(rules: Rules = Depends(get_rules)) -> HTMLResponse:
    return HTMLResponse(
        render_page(rules.church, "Área de Líderes", render_login(random.choice(LOGIN_VERSES)))
    )
