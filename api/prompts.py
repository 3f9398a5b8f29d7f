"""Prompt templates for search results and generated pages."""

from models.search import ResultPageRequest

RESULTS_PER_PAGE = 10


def build_search_prompt(query: str, page: int) -> str:
    template = ",\n".join(
        f'{{"title":"Title {i}","description":"Description {i}","url":"https://example{i}.com"}}'
        for i in range(1, RESULTS_PER_PAGE + 1)
    )
    return (
        f'Generate exactly {RESULTS_PER_PAGE} search results for "{query}" (page {page}). '
        "Return ONLY valid JSON array with no extra text. "
        "Make sure results are different from previous pages:\n"
        f"[\n{template}\n]"
    )


PAGE_PROMPT_TEMPLATE = """Create a realistic webpage that provides GENUINE, VALUABLE INFORMATION about the specific topic. This must be content that would actually be useful to someone searching for this information.

SEARCH CONTEXT:
- Query: "{query}"
- Title: "{title}"
- Description: "{description}"
- URL: "{url}"

CRITICAL: The page must contain REAL, USEFUL INFORMATION about the topic in the title. Analyze what someone searching for "{query}" would actually want to learn about "{title}".

CONTENT REQUIREMENTS:
1. SUBSTANTIAL INFORMATION (800-1200 words) directly related to the title topic
2. Include SPECIFIC, PRACTICAL details like:
   - Step-by-step instructions or guides
   - Technical specifications or requirements
   - Pricing, costs, or budget information
   - Pros and cons, comparisons
   - Real examples, case studies, or scenarios
   - Historical context or background
   - Tips, best practices, common mistakes
   - Relevant statistics or data

3. Make it GENUINELY HELPFUL - someone should learn something valuable
4. Include realistic details: dates, locations, names, prices, measurements
5. Write in a knowledgeable, authoritative tone
6. Structure with clear, topic-specific headings

DESIGN VARIETY (choose randomly):
- Technical documentation style (clean, organized)
- Blog article with author bio
- Review/comparison site
- Educational resource page
- News/magazine article
- Product showcase page
- Tutorial/how-to guide
- Industry analysis report

VISUAL THEMES (vary each time):
- Professional blue/gray scheme
- Warm earthy tones (browns/oranges)
- Modern dark theme
- Clean minimal white/gray
- Vibrant color accents
- Corporate navy/white
- Creative colorful design
- Tech-focused purple/cyan

NEVER:
- Use generic business content ("Our Services", "Contact Us")
- Make it about a fake company selling services
- Include placeholder text or vague descriptions
- Mention it's AI-generated or fake

FOCUS: Create content someone would genuinely bookmark or share because it's useful for understanding "{title}".

CRITICAL JSON FORMATTING RULES:
1. Return ONLY valid JSON - no explanations, no markdown, no extra text
2. Use only double quotes (") for JSON strings
3. Escape all quotes inside content with \\"
4. No line breaks inside JSON string values - use \\n instead
5. No unescaped special characters
6. Always end properties with commas except the last one

YOU MUST INCLUDE ALL 4 PROPERTIES: html, css, title, url

EXACT FORMAT (ALL 4 PROPERTIES REQUIRED):
{{
  "html": "<!DOCTYPE html><html lang='en'><head><meta charset='UTF-8'><meta name='viewport' content='width=device-width, initial-scale=1.0'><title>{title}</title></head><body>[HTML_CONTENT_HERE]</body></html>",
  "css": "[CSS_CONTENT_HERE]",
  "title": "{title}",
  "url": "{url}"
}}

CRITICAL: Your response must end with the url property. Do not forget title and url!"""


def build_page_prompt(request: ResultPageRequest) -> str:
    return PAGE_PROMPT_TEMPLATE.format(
        query=request.original_query,
        title=request.result.title,
        description=request.result.description,
        url=request.result.url,
    )
