QUALITATIVE_ANALYSIS_SYSTEM_PROMPT = """
You are an experienced editor reviewing writing samples submitted by job applicants.
Respond with a single JSON object and nothing else.
"""

QUALITATIVE_ANALYSIS_USER_PROMPT = """
Analyze this content writing sample for a {role_type} position.

Content to analyze:
\"\"\"
{content}
\"\"\"

Please provide a comprehensive analysis including:

1. **Overall Quality Assessment** (1-10 score)
   - Writing clarity and coherence
   - Argument structure and flow
   - Engagement and readability

2. **Technical Writing Skills** (1-10 score)
   - Grammar and syntax
   - Vocabulary usage
   - Sentence variety

3. **Content Strategy** (1-10 score)
   - Understanding of audience
   - Value proposition clarity
   - Call-to-action effectiveness

4. **SEO & Digital Marketing** (1-10 score)
   - Keyword usage (natural integration)
   - Meta descriptions and headings
   - Content structure for web

5. **Strengths and Areas for Improvement**
   - List 3 key strengths
   - List 3 areas that could be improved

6. **Hiring Recommendation**
   - Overall score (1-100)
   - Recommendation: STRONG_HIRE | HIRE | MAYBE | NO_HIRE
   - Brief justification (2-3 sentences)

Provide your analysis in JSON format.
"""


def format_role_type(role_type: str) -> str:
    """'content_writing' -> 'content writing'."""
    return (role_type or "content_writing").replace("_", " ")
