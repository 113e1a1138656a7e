"""
Seleção de categoria e geração de slogan a partir do perfil do usuário.
- Categoria: o LLM escolhe da taxonomia fixa; a resposta é mapeada por substring.
- Anúncio: slogan curto para a categoria, com frase padrão se o LLM não responder.
"""

from dataclasses import dataclass

import llm_client
from errors import ValidationError

# Ordem importa: a primeira categoria contida na resposta vence
AD_CATEGORIES = (
    "Arts & Entertainment", "Automotive", "Business & Finance", "Careers",
    "Education", "Family & Parenting", "Food & Drink", "Health & Fitness",
    "Hobbies & Interests", "Home & Garden", "Law, Government & Politics",
    "News", "Personal Finance", "Pets", "Real Estate", "Science", "Shopping",
    "Society", "Sports", "Style & Fashion", "Technology & Computing", "Travel",
    "Weather",
)

DEFAULT_CATEGORY = "Shopping"

MISSING_PROFILE_MESSAGE = "Request is missing gender or age."
MISSING_AD_FIELDS_MESSAGE = "Request is missing gender, age, or category."


@dataclass(frozen=True)
class UserProfile:
    gender: str
    age: int | float
    location: str | None = None


def parse_profile(data, require_category: bool = False) -> tuple[UserProfile, str | None]:
    """Valida o corpo JSON e retorna (perfil, categoria)."""

    if not isinstance(data, dict):
        data = {}

    gender = data.get("gender")
    age = data.get("age")
    category = data.get("category")

    if require_category:
        if not gender or age is None or not category:
            raise ValidationError(MISSING_AD_FIELDS_MESSAGE)
    elif not gender or age is None:
        raise ValidationError(MISSING_PROFILE_MESSAGE)

    profile = UserProfile(gender=gender, age=age, location=data.get("location") or None)
    return profile, category


def describe_subject(profile: UserProfile) -> str:
    """Descrição em linguagem natural do perfil, usada nos prompts."""
    description = f"a {profile.gender}, around {profile.age} years old"
    if profile.location:
        description += f" from {profile.location}"
    return description


def build_category_prompt(profile: UserProfile) -> str:
    """Prompt de escolha de categoria com a taxonomia completa."""
    return (
        f"For {describe_subject(profile)}, pick the most relevant ad category "
        f"from this list: [{', '.join(AD_CATEGORIES)}]. Return only the category name."
    )


def build_ad_prompt(profile: UserProfile, category: str) -> str:
    """Prompt do slogan (até 25 palavras) para a categoria."""
    return (
        f'Create a modern, appealing ad slogan for "{category}", targeted at '
        f"{describe_subject(profile)}. Keep it under 25 words."
    )


def match_category(reply: str) -> str:
    """Mapeia a resposta livre do LLM para um item da taxonomia."""
    reply = reply or ""
    for category in AD_CATEGORIES:
        if category in reply:
            return category
    return DEFAULT_CATEGORY


def fallback_ad(category: str) -> str:
    """Slogan padrão quando o LLM não devolve texto."""
    return f"Explore the infinite possibilities of {category}!"


def select_category(profile: UserProfile) -> str:
    """Pergunta ao LLM e mapeia a resposta para a taxonomia."""
    reply = llm_client.call_llm(build_category_prompt(profile))
    return match_category(reply)


def generate_ad(profile: UserProfile, category: str) -> str:
    """Gera o slogan; nunca retorna string vazia."""
    ad = llm_client.call_llm(build_ad_prompt(profile, category))
    return ad or fallback_ad(category)
