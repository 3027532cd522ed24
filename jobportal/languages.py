"""
Supported chat languages and their system prompts.

Each language owns a prompt template function that receives the rendered
job listing block. Unknown language codes fall back to DEFAULT_LANGUAGE.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class Labels:
    title: str
    company: str
    role: str
    salary: str
    location: str
    skills: str
    description: str
    missing_description: str
    no_jobs: str


@dataclass(frozen=True)
class Language:
    code: str
    label: str
    speech_locale: str
    labels: Labels
    template: Callable[[str], str]


# ── Prompt templates ──────────────────────────────────────────────────────────

def _english_prompt(jobs_block: str) -> str:
    return f"""You are a helpful job assistant for Job Portal India. You help job seekers find the perfect job match.

Available jobs:
{jobs_block}

Help users by:
1. Understanding their skills and preferences
2. Matching them with suitable jobs
3. Providing detailed information about job listings
4. Answering questions about job requirements
5. Being encouraging and professional

Keep responses concise and friendly."""


def _hindi_prompt(jobs_block: str) -> str:
    return f"""आप जॉब पोर्टल इंडिया के लिए एक सहायक नौकरी सहायक हैं। आप नौकरी चाहने वालों को सही नौकरी खोजने में मदद करते हैं।

उपलब्ध नौकरियां:
{jobs_block}

उपयोगकर्ताओं की मदद करें:
1. उनके कौशल और प्राथमिकताओं को समझकर
2. उन्हें उपयुक्त नौकरियों से मिलाकर
3. नौकरी की सूची के बारे में विस्तृत जानकारी देकर
4. नौकरी की आवश्यकताओं के बारे में सवालों का जवाब देकर
5. प्रोत्साहनपूर्ण और पेशेवर बनकर

संक्षिप्त और मित्रवत उत्तर दें।"""


def _punjabi_prompt(jobs_block: str) -> str:
    return f"""ਤੁਸੀਂ ਜੌਬ ਪੋਰਟਲ ਇੰਡੀਆ ਲਈ ਇੱਕ ਮਦਦਗਾਰ ਨੌਕਰੀ ਸਹਾਇਕ ਹੋ। ਤੁਸੀਂ ਨੌਕਰੀ ਲੱਭਣ ਵਾਲਿਆਂ ਨੂੰ ਸਹੀ ਨੌਕਰੀ ਲੱਭਣ ਵਿੱਚ ਮਦਦ ਕਰਦੇ ਹੋ।

ਉਪਲਬਧ ਨੌਕਰੀਆਂ:
{jobs_block}

ਯੂਜ਼ਰਾਂ ਦੀ ਮਦਦ ਕਰੋ:
1. ਉਹਨਾਂ ਦੇ ਹੁਨਰ ਅਤੇ ਤਰਜੀਹਾਂ ਨੂੰ ਸਮਝ ਕੇ
2. ਉਹਨਾਂ ਨੂੰ ਢੁਕਵੀਆਂ ਨੌਕਰੀਆਂ ਨਾਲ ਮਿਲਾ ਕੇ
3. ਨੌਕਰੀ ਸੂਚੀ ਬਾਰੇ ਵਿਸਥਾਰ ਜਾਣਕਾਰੀ ਦੇ ਕੇ
4. ਨੌਕਰੀ ਦੀਆਂ ਲੋੜਾਂ ਬਾਰੇ ਸਵਾਲਾਂ ਦੇ ਜਵਾਬ ਦੇ ਕੇ
5. ਹੌਸਲਾ ਦੇਣ ਵਾਲੇ ਅਤੇ ਪੇਸ਼ੇਵਰ ਬਣ ਕੇ

ਸੰਖੇਪ ਅਤੇ ਦੋਸਤਾਨਾ ਜਵਾਬ ਦਿਓ।"""


# ── Registry ──────────────────────────────────────────────────────────────────

LANGUAGES: Dict[str, Language] = {
    "en": Language(
        code="en",
        label="English",
        speech_locale="en-IN",
        labels=Labels(
            title="Title",
            company="Company",
            role="Role",
            salary="Salary",
            location="Location",
            skills="Skills",
            description="Description",
            missing_description="N/A",
            no_jobs="No jobs available at the moment.",
        ),
        template=_english_prompt,
    ),
    "hi": Language(
        code="hi",
        label="हिंदी",
        speech_locale="hi-IN",
        labels=Labels(
            title="शीर्षक",
            company="कंपनी",
            role="भूमिका",
            salary="वेतन",
            location="स्थान",
            skills="कौशल",
            description="विवरण",
            missing_description="उपलब्ध नहीं",
            no_jobs="इस समय कोई नौकरी उपलब्ध नहीं है।",
        ),
        template=_hindi_prompt,
    ),
    "pa": Language(
        code="pa",
        label="ਪੰਜਾਬੀ",
        speech_locale="pa-IN",
        labels=Labels(
            title="ਸਿਰਲੇਖ",
            company="ਕੰਪਨੀ",
            role="ਭੂਮਿਕਾ",
            salary="ਤਨਖਾਹ",
            location="ਸਥਾਨ",
            skills="ਹੁਨਰ",
            description="ਵੇਰਵਾ",
            missing_description="ਉਪਲਬਧ ਨਹੀਂ",
            no_jobs="ਇਸ ਸਮੇਂ ਕੋਈ ਨੌਕਰੀ ਉਪਲਬਧ ਨਹੀਂ ਹੈ।",
        ),
        template=_punjabi_prompt,
    ),
}


def resolve_language(code: Optional[str]) -> Language:
    """Return the registry entry for code, or the default language."""
    if isinstance(code, str) and code in LANGUAGES:
        return LANGUAGES[code]
    return LANGUAGES[DEFAULT_LANGUAGE]


def format_job(job: dict, labels: Labels) -> str:
    skills = ", ".join(str(skill) for skill in job.get("skills_required") or [])
    description = job.get("description") or labels.missing_description
    return (
        f"\n- {labels.title}: {job.get('title')}"
        f"\n- {labels.company}: {job.get('company_name')}"
        f"\n- {labels.role}: {job.get('role')}"
        f"\n- {labels.salary}: {job.get('salary')}"
        f"\n- {labels.location}: {job.get('location')}"
        f"\n- {labels.skills}: {skills}"
        f"\n- {labels.description}: {description}\n"
    )


def render_system_prompt(code: Optional[str], jobs: Iterable[dict]) -> str:
    """Render the system prompt for a language, embedding the given job rows in order."""
    language = resolve_language(code)
    blocks: List[str] = [format_job(job, language.labels) for job in jobs]
    jobs_block = "\n".join(blocks) if blocks else language.labels.no_jobs
    return language.template(jobs_block)
