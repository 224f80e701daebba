"""Per-variant parsing markers, default values and fallback topic lists.

Both product skins run through the same prompt builder and parser; only the
values in this table differ between them.
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import Variant


@dataclass(frozen=True)
class VariantProfile:
    """Static settings for one product variant."""
    variant: Variant
    tips_marker: str
    estimate_marker: str
    tips_instruction: str
    estimate_instruction: str
    default_content: str
    default_sections: tuple[str, ...]
    default_keywords: tuple[str, ...]
    default_tips: tuple[str, ...]
    default_estimate: str
    fallback_topics: tuple[str, ...]
    topic_prompt: str


ACADEMIC_FALLBACK_TOPICS = (
    "Machine Learning Applications",
    "Web Development Projects",
    "Data Science Analysis",
    "Mobile App Development",
    "IoT Smart Systems",
    "Blockchain Technology",
    "Cloud Computing",
    "Cybersecurity Solutions",
    "AI Chatbot Development",
    "E-commerce Platform",
)

SOCIAL_FALLBACK_TOPICS = (
    "ঈদের কেনাকাটা",
    "বাংলাদেশ ক্রিকেট",
    "ঢাকার ট্রাফিক জ্যাম",
    "পহেলা বৈশাখ উদযাপন",
    "ফ্রিল্যান্সিং টিপস",
    "বর্ষার রেসিপি",
    "বিশ্ববিদ্যালয় জীবন",
    "স্মার্টফোন রিভিউ",
    "বাংলাদেশে ভ্রমণ",
    "মা-বাবার ভালোবাসা",
)

ACADEMIC_PROFILE = VariantProfile(
    variant=Variant.ACADEMIC,
    tips_marker="TIPS",
    estimate_marker="ESTIMATED_LENGTH",
    tips_instruction="Provide 5-7 helpful tips related to this content",
    estimate_instruction="Estimated word count and reading time",
    default_content="Failed to generate content",
    default_sections=("Introduction", "Main Content", "Conclusion"),
    default_keywords=("Research", "Study", "Project"),
    default_tips=("Plan thoroughly", "Stay organized", "Seek feedback"),
    default_estimate="Comprehensive content",
    fallback_topics=ACADEMIC_FALLBACK_TOPICS,
    topic_prompt=(
        "Suggest 10 trending and popular topics for student projects, research, "
        "and assignments in technology and academia. "
        "Only provide topic names, one per line."
    ),
)

SOCIAL_PROFILE = VariantProfile(
    variant=Variant.SOCIAL,
    tips_marker="ENGAGEMENT_TIPS",
    estimate_marker="ESTIMATED_REACH",
    tips_instruction="Provide 5-7 tips to maximise likes, shares and comments",
    estimate_instruction="Estimated reach and engagement potential",
    default_content="Failed to generate content",
    default_sections=("Hook", "Main Message", "Call to Action"),
    default_keywords=("viral", "trending", "bangladesh"),
    default_tips=("Post at peak hours", "Reply to comments quickly", "Use trending hashtags"),
    default_estimate="High engagement potential",
    fallback_topics=SOCIAL_FALLBACK_TOPICS,
    topic_prompt=(
        "Suggest 10 trending and viral topics for Bangla social media content "
        "in Bangladesh right now. Write the topic names in Bangla. "
        "Only provide topic names, one per line."
    ),
)

_PROFILES = {
    Variant.ACADEMIC: ACADEMIC_PROFILE,
    Variant.SOCIAL: SOCIAL_PROFILE,
}


def get_profile(variant: Variant) -> VariantProfile:
    """Look up the profile for a variant."""
    return _PROFILES[Variant(variant)]
