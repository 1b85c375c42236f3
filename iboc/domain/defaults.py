"""
Built-in defaults: the initial site content, sample members used by the
seeder, and the verse lists shown on the login page and the social gallery.
"""

from iboc.domain.entities import Member, SiteContent, SocialProjectItem

SOCIAL_ACTION_VERSES: list[tuple[str, str]] = [
    ("Filhinhos, não amemos de palavra, nem de língua, mas por obra e em verdade.", "1 João 3:18"),
    ("Assim também a fé, se não tiver as obras, é morta em si mesma.", "Tiago 2:17"),
    (
        "Pois eu tive fome, e vocês me deram de comer; tive sede, e vocês me deram de beber.",
        "Mateus 25:35",
    ),
    ("E não nos cansemos de fazer o bem, pois no tempo próprio colheremos.", "Gálatas 6:9"),
    (
        "A religião pura e imaculada para com Deus é esta: visitar os órfãos e as viúvas.",
        "Tiago 1:27",
    ),
]

LOGIN_VERSES: list[tuple[str, str]] = [
    ("Lâmpada para os meus pés é a tua palavra, e luz para o meu caminho.", "Salmos 119:105"),
    (
        "Eu sou o caminho, a verdade e a vida. Ninguém vem ao Pai, a não ser por mim.",
        "João 14:6",
    ),
    (
        "Confia no Senhor de todo o teu coração e não te estribes no teu próprio entendimento.",
        "Provérbios 3:5",
    ),
    ("Aquele que habita no esconderijo do Altíssimo, à sombra do Onipotente descansará.", "Salmos 91:1"),
    (
        "Espera no Senhor, anima-te, e ele fortalecerá o teu coração; espera, pois, no Senhor.",
        "Salmos 27:14",
    ),
    ("Tudo posso naquele que me fortalece.", "Filipenses 4:13"),
    (
        "Porque dele, e por ele, e para ele são todas as coisas; glória, pois, a ele eternamente.",
        "Romanos 11:36",
    ),
]

ROSTER_QUOTE = (
    '"Dormi e sonhei que a vida era alegria. Acordei e vi que a vida era serviço. '
    'Agi e eis que o serviço era alegria."'
)
ROSTER_QUOTE_AUTHOR = "- Rabindranath Tagore"


def initial_site_content() -> SiteContent:
    return SiteContent(
        hero_title="Um lugar de fé, esperança e amor.",
        hero_subtitle=(
            "Junte-se a nós para adorar a Deus e crescer em comunhão. "
            "Você é nosso convidado especial."
        ),
        hero_button_text="Conheça Nossa História",
        hero_image_url=(
            "https://images.unsplash.com/photo-1438232992991-995b7058bbb3"
            "?q=80&w=2073&auto=format&fit=crop"
        ),
        next_event_title="Conferência de Família",
        next_event_date="2023-11-25",
        next_event_time="19:00",
        next_event_description="Uma noite especial para abençoar sua casa.",
        next_event_location="R. Icaraçu, 1110 - Barroso",
        youtube_live_link="https://youtube.com",
        social_project_title="Projeto Amor em Ação",
        social_project_description=(
            "Levando esperança e suprimento para as famílias da nossa comunidade através "
            "da distribuição de cestas básicas e apoio espiritual."
        ),
        social_project_items=[
            SocialProjectItem(
                image_url="https://images.unsplash.com/photo-1593113598332-cd288d649433?q=80&w=2070",
                verse="Pois eu tive fome, e vocês me deram de comer.",
                verse_reference="Mateus 25:35",
                registered_at=1700000000001,
            ),
            SocialProjectItem(
                image_url="https://images.unsplash.com/photo-1488521787991-ed7bbaae773c?q=80&w=2070",
                verse="A fé, se não tiver as obras, é morta em si mesma.",
                verse_reference="Tiago 2:17",
                registered_at=1700000000002,
            ),
            SocialProjectItem(
                image_url="https://images.unsplash.com/photo-1469571486292-0ba58a3f068b?q=80&w=2070",
                verse="Não amemos de palavra, mas por obra e em verdade.",
                verse_reference="1 João 3:18",
                registered_at=1700000000003,
            ),
        ],
    )


def sample_members() -> list[Member]:
    return [
        Member(
            full_name="CARLOS SILVA",
            email="carlos@email.com",
            phone="(85) 99999-9999",
            birth_date="1980-05-15",
            status="Ativo",
            role="Diácono",
            address="Rua A, 123",
        ),
        Member(
            full_name="ANA PEREIRA",
            email="ana@email.com",
            phone="(85) 98888-8888",
            birth_date="1992-10-20",
            status="Ativo",
            role="Membro",
            address="Rua B, 456",
        ),
        Member(
            full_name="MARCOS OLIVEIRA",
            email="marcos@email.com",
            phone="(85) 97777-7777",
            birth_date="1975-03-10",
            status="Ausente",
            role="Membro",
            address="Rua C, 789",
        ),
        Member(
            full_name="PR. JOÃO SANTOS",
            email="joao@iboc.com",
            phone="(85) 96666-6666",
            birth_date="1965-08-05",
            status="Ativo",
            role="Pastor",
            address="Rua D, 101",
        ),
    ]
