"""Prompt templates and builders for content generation.

Every content prompt ends with an output-format block asking the model to
wrap each field in START/END markers. The parser relies on those markers,
so user text is never escaped: a topic that itself contains a marker can
confuse extraction.
"""

from __future__ import annotations

import re

from .models import ContentRequest, ContentType, Variant
from .profiles import VariantProfile, get_profile

NO_DETAILS_SENTINEL = "No additional details provided"

# Marker names; the model echoes NAME_START ... NAME_END around each field
TITLE_MARKER = "CONTENT_TITLE"
BODY_MARKER = "CONTENT_BODY"
SECTIONS_MARKER = "SECTIONS"
KEYWORDS_MARKER = "KEYWORDS"

_PLACEHOLDER_RE = re.compile(r"\{\{(TOPIC|TONE|AUDIENCE|DETAILS)\}\}")

CONTENT_PROMPTS: dict[ContentType, str] = {
    ContentType.PROJECT_IDEAS: """\
You are a creative project idea generator and innovation consultant.

Topic: "{{TOPIC}}"
Tone: {{TONE}}
Audience: {{AUDIENCE}}
Additional Details: {{DETAILS}}

Generate 5-7 unique and innovative project ideas related to the topic.

Structure:

🎯 **Introduction**:
- Brief overview of the topic domain
- Why these projects are relevant and valuable

💡 **Project Ideas** (5-7 ideas):
For each project idea include:
- Project Name (creative and memorable)
- Description (2-3 sentences)
- Key Features (3-4 bullet points)
- Technology Stack suggestion
- Difficulty Level (Beginner/Intermediate/Advanced)
- Estimated Timeline
- Impact & Value

🚀 **Implementation Tips**:
- Getting started advice
- Resources needed
- Common challenges to avoid

Special Instructions:
- Make ideas innovative and practical
- Consider current trends and technologies
- Ensure feasibility for the target audience
- Include real-world applications
""",
    ContentType.PROJECT_REPORT: """\
You are an expert academic writer and project documentation specialist.

Topic: "{{TOPIC}}"
Tone: {{TONE}}
Audience: {{AUDIENCE}}
Additional Details: {{DETAILS}}

Create a comprehensive project report with the following structure:

📋 **Title & Abstract**:
- Compelling project title
- Executive summary (150-200 words)
- Key objectives and outcomes

🎯 **Introduction**:
- Background and context
- Problem statement
- Project objectives
- Scope and limitations

🔍 **Literature Review / Background Research**:
- Current state of the field
- Related work and existing solutions
- Research gaps identified

⚙️ **Methodology**:
- Approach and framework
- Tools and technologies used
- Implementation process
- System architecture/design

📊 **Results & Analysis**:
- Key findings and outcomes
- Data analysis and interpretation
- Performance metrics
- Comparative analysis

💡 **Discussion**:
- Interpretation of results
- Implications and significance
- Challenges faced and solutions
- Future improvements

🎬 **Conclusion**:
- Summary of achievements
- Contribution to the field
- Recommendations
- Future scope

📚 **References & Resources**:
- Suggested reading materials
- Tools and frameworks

Special Instructions:
- Use formal academic language
- Include specific details and examples
- Make it publication-ready
- Ensure logical flow between sections
""",
    ContentType.ASSIGNMENT_SOLUTION: """\
You are an expert educator and assignment solution provider.

Topic: "{{TOPIC}}"
Tone: {{TONE}}
Audience: {{AUDIENCE}}
Additional Details: {{DETAILS}}

Create a comprehensive assignment solution with deep explanations:

📝 **Assignment Overview**:
- Understanding the question/problem
- Key concepts involved
- Learning objectives

💡 **Theoretical Foundation**:
- Core concepts explanation
- Relevant theories and principles
- Background knowledge needed

🔬 **Step-by-Step Solution**:
- Break down the problem
- Detailed solution process
- Each step explained thoroughly
- Formulas/algorithms used
- Code snippets (if applicable)
- Diagrams and examples

📊 **Analysis & Verification**:
- Result validation
- Alternative approaches
- Comparison of methods
- Error analysis

🎯 **Key Takeaways**:
- Important points to remember
- Common mistakes to avoid
- Best practices
- Related concepts

📚 **Practice & Extension**:
- Similar problems to practice
- Advanced variations
- Real-world applications
- Further study resources

🌟 **Study Tips**:
- How to master this topic
- Effective learning strategies
- Resources for deeper understanding

Special Instructions:
- Explain every step clearly
- Use examples and analogies
- Include visual descriptions
- Make it easy to understand
- Provide complete, detailed solutions
- Focus on learning, not just answers
""",
    ContentType.FACEBOOK_POST: """\
You are a viral Bangla social media content creator for Facebook.

Topic: "{{TOPIC}}"
Tone: {{TONE}}
Audience: {{AUDIENCE}}
Additional Details: {{DETAILS}}

Write one scroll-stopping Facebook post in natural, conversational Bangla.

Structure:

🔥 **Hook**:
- First line that stops the scroll (question, bold claim or surprising fact)

💬 **Story / Main Message**:
- Relatable story or insight connected to everyday life in Bangladesh
- Short paragraphs, one idea each
- Use <br> for line breaks inside the post

👉 **Call to Action**:
- Ask readers to comment, share or tag a friend

Special Instructions:
- Write the post body in Bangla
- Keep it authentic, not salesy
- Use #word hashtags only if hashtags are requested
""",
    ContentType.REEL_SCRIPT: """\
You are a short-form video scriptwriter for Bangla Facebook Reels, Instagram Reels and YouTube Shorts.

Topic: "{{TOPIC}}"
Tone: {{TONE}}
Audience: {{AUDIENCE}}
Additional Details: {{DETAILS}}

Write a 30-60 second reel script in Bangla.

Structure:

🎬 **Hook (0-3 sec)**:
- Opening line or visual that grabs attention immediately

📹 **Scenes**:
- Numbered scenes with on-screen text, voiceover line and visual direction
- Use <br> for line breaks between scenes

🎵 **Audio & Editing**:
- Suggested trending audio style
- Transition and caption ideas

👉 **Ending / Call to Action**:
- Loopable ending or follow prompt

Special Instructions:
- Keep sentences short and spoken-style
- Every scene must move the story forward
- Write voiceover and on-screen text in Bangla
""",
    ContentType.INSTAGRAM_CAPTION: """\
You are an Instagram caption writer for Bangla creators and brands.

Topic: "{{TOPIC}}"
Tone: {{TONE}}
Audience: {{AUDIENCE}}
Additional Details: {{DETAILS}}

Write 3 alternative Instagram captions in Bangla.

Structure for each caption:

✨ **Opening Line**:
- Catchy first line visible before "more"

💬 **Body**:
- 2-4 short lines that add value or emotion
- Use <br> for line breaks

👉 **Call to Action**:
- Save, share, comment or follow prompt

Special Instructions:
- Number the captions 1-3
- Match the requested tone exactly
- Use #word hashtags only if hashtags are requested
""",
}

KEYWORD_PROMPTS: dict[ContentType, str] = {
    ContentType.PROJECT_IDEAS: "Generate 10-15 relevant keywords and trending tags for these project ideas",
    ContentType.PROJECT_REPORT: "Generate 10-15 academic keywords and research tags for this project report",
    ContentType.ASSIGNMENT_SOLUTION: "Generate 10-15 study keywords and concept tags for this assignment topic",
    ContentType.FACEBOOK_POST: "Generate 10-15 trending hashtags and search keywords for this Facebook post",
    ContentType.REEL_SCRIPT: "Generate 10-15 trending hashtags and discovery keywords for this reel",
    ContentType.INSTAGRAM_CAPTION: "Generate 10-15 trending Instagram hashtags and keywords for this caption",
}


def marker_pair(marker: str, placeholder: str) -> str:
    """Render one START/END block for the output-format instructions."""
    return f"{marker}_START\n[{placeholder}]\n{marker}_END"


def _output_format(profile: VariantProfile) -> str:
    blocks = [
        marker_pair(TITLE_MARKER, "Write the title here"),
        marker_pair(BODY_MARKER, "Write the main content here with all sections"),
        marker_pair(SECTIONS_MARKER, "List main section headings, one per line"),
        marker_pair(profile.tips_marker, profile.tips_instruction),
        marker_pair(profile.estimate_marker, profile.estimate_instruction),
    ]
    return "\n\nOutput in the following format:\n\n" + "\n\n".join(blocks)


def _format_details(request: ContentRequest) -> str:
    """Details text for the {{DETAILS}} slot."""
    details = request.additional_details or NO_DETAILS_SENTINEL
    if request.variant != Variant.SOCIAL:
        return details

    lines = [details]
    if request.word_count:
        lines.append(f"Target length: about {request.word_count} words")
    lines.append("Hashtags: " + ("include relevant hashtags" if request.include_hashtags else "do not use hashtags"))
    lines.append("Emojis: " + ("use emojis naturally" if request.include_emojis else "do not use emojis"))
    return "\n".join(lines)


def build_content_prompt(request: ContentRequest) -> str:
    """Build the main content prompt for a request.

    Placeholders are substituted in a single pass, so user text is never
    re-scanned for further placeholders. The output-format block is
    appended verbatim.

    Raises:
        KeyError: If the content type has no template.
    """
    template = CONTENT_PROMPTS[request.content_type]
    values = {
        "TOPIC": request.topic,
        "TONE": request.tone.value,
        "AUDIENCE": request.audience.value,
        "DETAILS": _format_details(request),
    }
    body = _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], template)
    return body + _output_format(get_profile(request.variant))


def build_keyword_prompt(request: ContentRequest) -> str:
    """Build the keyword prompt; the reply is wrapped in KEYWORDS markers."""
    instruction = KEYWORD_PROMPTS[request.content_type]
    return f"""\
{instruction} for topic: "{request.topic}"

Output in the following format:

{marker_pair(KEYWORDS_MARKER, "Write keywords here, one per line")}"""


def build_topic_suggestion_prompt(variant: Variant) -> str:
    return get_profile(variant).topic_prompt
