"""Prompt assembly for research synthesis.

The user prompt is laid out as:
  1. the user query
  2. the local-names table as a bulleted list (when names were found)
  3. the required Markdown response skeleton
  4. the context block: pharmacopoeia excerpts, article abstracts, then the
     local-names database
"""

from naijamed_atlas.models.article import ArticleRecord
from naijamed_atlas.models.herbal import HerbalExcerpt
from naijamed_atlas.models.plant_names import LocalPlantNames

SEPARATOR = "-" * 50

SYSTEM_PROMPT = """You are the "NaijaMed Atlas Assistant", a world-class AI Ethnobotanist and Research Scientist specialized in Nigerian Traditional Medicine.

YOUR MISSION:
Synthesize complex scientific abstracts into clear, culturally relevant, and actionable insights for Nigerian users. Bridge the gap between "Western Science" and "Indigenous Knowledge."

CORE GUIDELINES:
1. **Local Identity First**:
   - Always identify plants by Scientific Name AND Nigerian names
   {names_guideline}
   - Show native status (Is it native to Nigeria/West Africa?)

2. **Layman Accessibility**:
   - Explain complex terms (e.g., "antinociceptive" -> "pain-relieving")
   - Make scientific findings understandable

3. **Strict Citation**:
   - Every claim must cite [PMID:XXXX]
   - Base claims ONLY on provided abstracts

4. **Safety First**:
   - Highlight toxicity, dosage limits, contraindications
   - Create dedicated safety section

5. **Cultural Context**:
   - Note if plants are not native to Nigeria
   - Mention availability in Nigerian markets if relevant

6. **Pharmacopoeia Data Integration (If Present)**:
   - Include traditional medicinal uses, plant parts used, preparation methods and dosage levels from pharmacopoeia sources
   - Include toxicity and safety warnings from pharmacopoeia sources
   - Cite sources using **[AHP:PageX]** or **[WAP:PageX]** for pharmacopoeia data."""

RESPONSE_SKELETON = """RESPONSE FORMAT (Use this Markdown structure):

## Summary: [Main Topic]
*2-3 sentences summarizing the main findings for the user.*
{plants_section}
## Scientific Evidence

### [Plant 1 Common Name] (*Scientific name*)
**Nigerian Names:** [From database above]
**Native Status:** [Yes/No]

**[Medical Property/Use 1]:** Detailed explanation of findings... [PMID:XXXX]
**[Medical Property/Use 2]:** Detailed explanation of findings... [PMID:XXXX]

*(Repeat structure for each plant)*

## Safety & Precautions

* **Toxicity Warnings:** Any toxicity mentioned in studies [PMID:XXXX]
* **Dosage Information:** Safe doses if mentioned [PMID:XXXX]
* **Contraindications:** Who should avoid it [PMID:XXXX]
* **Side Effects:** Observed adverse effects [PMID:XXXX]

## Preparation & Traditional Use

**Research Preparations:** Extract types used (aqueous, ethanol, methanol) [PMID:XXXX]
**Plant Parts Used:** Leaves, roots, bark, seeds, etc. [PMID:XXXX]
**Traditional Methods:** If mentioned in the research [PMID:XXXX]

**Disclaimer:** This information is for educational purposes only. Always consult a qualified healthcare professional before using any herbal remedy."""


def format_local_names(names: LocalPlantNames) -> str:
    """Render known local names as ``Yoruba: *ewe* • Igbo: *...*``."""
    parts = [f"{language}: *{name}*" for language, name in names.language_names()]
    if parts:
        return " • ".join(parts)
    if names.notes:
        return f"*[No traditional names found - {names.notes}]*"
    return "*[No Nigerian traditional names documented]*"


def _native_label(names: LocalPlantNames) -> str:
    return "Yes" if names.is_native else "No"


def build_system_prompt(has_local_names: bool) -> str:
    guideline = (
        "- USE THE PROVIDED NIGERIAN NAMES DATABASE in your response"
        if has_local_names
        else "- Add Nigerian names if you know them"
    )
    return SYSTEM_PROMPT.format(names_guideline=guideline)


def build_herbal_context(excerpts: list[HerbalExcerpt]) -> str:
    blocks = [
        f"### PHARMACOPOEIA SOURCE\n"
        f"SOURCE: {excerpt.source.label}\n"
        f"CITE AS: {excerpt.citation}\n"
        f"PAGE: {excerpt.page}\n"
        f"TEXT: {excerpt.text}\n"
        f"{SEPARATOR}\n"
        for excerpt in excerpts
    ]
    return "".join(blocks)


def build_article_context(articles: list[ArticleRecord]) -> str:
    blocks = [
        f"### SOURCE {index}\n"
        f"ID: PMID:{article.pmid}\n"
        f"TITLE: {article.title}\n"
        f"DATE: {article.pub_date}\n"
        f"TEXT: {article.abstract}\n"
        f"{SEPARATOR}\n"
        for index, article in enumerate(articles, 1)
    ]
    return "".join(blocks)


def build_names_database(local_names: dict[str, LocalPlantNames]) -> str:
    if not local_names:
        return ""

    lines = ["\nNIGERIAN TRADITIONAL NAMES DATABASE\n"]
    for scientific_name, names in local_names.items():
        lines.append(f"\n**{scientific_name}** ({names.common_name})")
        lines.append(f"- Nigerian Names: {format_local_names(names)}")
        lines.append(f"- Native to Nigeria/West Africa: {_native_label(names)}")
        if names.notes:
            lines.append(f"- Note: {names.notes}")
        lines.append("---")
    return "\n".join(lines) + "\n"


def _plants_section(local_names: dict[str, LocalPlantNames]) -> str:
    if not local_names:
        return ""

    entries = []
    for names in local_names.values():
        entry = (
            f"### {names.common_name or names.scientific_name}\n"
            f"*Scientific Name: {names.scientific_name}*\n"
            f"**Local Names:** {format_local_names(names)}\n"
            f"**Native to Nigeria:** {_native_label(names)}"
        )
        if names.notes:
            entry += f"\n**Note:** {names.notes}"
        entries.append(entry)

    return "\n## Plants Covered & Nigerian Names\n\n" + "\n\n".join(entries) + "\n\n---\n"


def build_user_prompt(
    query: str,
    articles: list[ArticleRecord],
    excerpts: list[HerbalExcerpt],
    local_names: dict[str, LocalPlantNames] | None = None,
) -> str:
    """Assemble the full synthesis prompt sent as the user message."""
    local_names = local_names or {}
    sections = [f'USER QUERY: "{query}"']

    if local_names:
        bullets = "\n".join(
            f"• {names.common_name} ({scientific_name}): {format_local_names(names)}"
            for scientific_name, names in local_names.items()
        )
        sections.append(
            "NIGERIAN NAMES DATABASE AVAILABLE:\n"
            f"{bullets}\n\n"
            "IMPORTANT: Use these exact names in your response. "
            "They are verified traditional names."
        )

    sections.append(RESPONSE_SKELETON.format(plants_section=_plants_section(local_names)))

    context = (
        build_herbal_context(excerpts)
        + build_article_context(articles)
        + build_names_database(local_names)
    )
    sections.append(f"CONTEXTUAL DATA TO ANALYZE:\n{context}")

    return "\n\n".join(sections)
