import logging
from datetime import datetime

from app.agents.interpreter import interpret
from app.agents.llm.base import LLMClient
from app.agents.schemas import AIFeatures, CareerImpact, Course, CourseModule, CustomCourse
from app.leads.schemas import CareerProfile

logger = logging.getLogger(__name__)

ARCHITECT_TEMPERATURE = 0.7
ARCHITECT_MAX_TOKENS = 4000


def build_course_prompt(profile: CareerProfile, skill_gaps: list[str], career_goals: str) -> str:
    tech_stack = ", ".join(profile.preferred_tech_stack) or "Not specified"
    gaps_text = ", ".join(skill_gaps)

    return f"""
You are an AI Course Architect for an edtech platform. Create a personalized course curriculum.

USER PROFILE:
- Current Role: {profile.current_role or "Not specified"}
- Experience: {profile.experience_level or "Not specified"}
- Tech Stack: {tech_stack}
- Goals: {career_goals}

IDENTIFIED SKILL GAPS:
{gaps_text}

Generate a custom course that includes:

1. Course metadata: creative title, compelling description, realistic duration,
   difficulty level, price between $50 and $500, technologies covered.
2. Detailed curriculum of 8-12 modules. For each module: title, 5-8 specific
   topics, practical projects, duration.
3. Unique features: AI-powered code reviews, mentor matching, certification,
   career placement support.
4. Learning outcomes: skills gained, salary impact estimate, portfolio projects.

Return as JSON with this structure:
{{
  "course": {{
    "id": "custom-course-[unique-id]",
    "title": "...",
    "description": "...",
    "difficulty": "Beginner|Intermediate|Advanced",
    "duration": "...",
    "price": number,
    "originalPrice": number,
    "rating": 4.8,
    "students": 0,
    "isPremium": true,
    "technologies": [...],
    "outcomes": [...],
    "modules": [
      {{
        "moduleNumber": 1,
        "title": "...",
        "topics": [...],
        "duration": "...",
        "isPreview": true/false,
        "requiresPremium": true/false,
        "practicalProjects": [...]
      }}
    ]
  }},
  "aiFeatures": {{
    "personalizedPath": "...",
    "mentorMatching": "...",
    "careerSupport": "...",
    "certification": "..."
  }},
  "careerImpact": {{
    "salaryIncrease": "...",
    "timeToCompletion": "...",
    "jobOpportunities": [...],
    "portfolioProjects": [...]
  }}
}}
""".strip()


def fallback_custom_course(profile: CareerProfile, now: datetime) -> dict:
    course = CustomCourse(
        course=Course(
            id=f"custom-course-{int(now.timestamp() * 1000)}",
            title="AI-Generated Personalized Course",
            description="A custom course tailored to your learning goals",
            difficulty="Intermediate",
            duration="8-12 weeks",
            price=299,
            original_price=499,
            rating=4.8,
            students=0,
            is_premium=True,
            technologies=profile.preferred_tech_stack or ["Programming"],
            outcomes=[
                "Master key skills for your career goals",
                "Build portfolio projects",
                "Gain industry-relevant experience",
                "Prepare for advanced roles",
            ],
            modules=[
                CourseModule(
                    module_number=1,
                    title="Foundation & Setup",
                    topics=["Getting Started", "Environment Setup", "Basic Concepts"],
                    duration="1 week",
                    is_preview=True,
                    requires_premium=False,
                    practical_projects=["Setup Project"],
                ),
                CourseModule(
                    module_number=2,
                    title="Core Skills Development",
                    topics=["Advanced Concepts", "Best Practices", "Real-world Applications"],
                    duration="2-3 weeks",
                    is_preview=True,
                    requires_premium=False,
                    practical_projects=["Mini Project"],
                ),
                CourseModule(
                    module_number=3,
                    title="Advanced Implementation",
                    topics=["Complex Patterns", "System Design", "Performance Optimization"],
                    duration="3-4 weeks",
                    is_preview=False,
                    requires_premium=True,
                    practical_projects=["Capstone Project"],
                ),
            ],
        ),
        ai_features=AIFeatures(
            personalized_path="Customized learning path based on your profile",
            mentor_matching="AI-matched mentors in your field",
            career_support="Career guidance and job placement assistance",
            certification="Industry-recognized certification",
        ),
        career_impact=CareerImpact(
            salary_increase="30-50% potential increase",
            time_to_completion="8-12 weeks",
            job_opportunities=["Senior Developer", "Team Lead", "Specialist"],
            portfolio_projects=["3 industry-level projects"],
        ),
    )
    return course.to_payload()


def generate_custom_course(llm: LLMClient, profile: CareerProfile, skill_gaps: list[str],
career_goals: str, now: datetime) -> dict:

    prompt = build_course_prompt(profile, skill_gaps, career_goals)

    # No system message; the whole brief goes in the user turn
    raw_text = llm.generate_text(
        system=None,
        user=prompt,
        temperature=ARCHITECT_TEMPERATURE,
        max_tokens=ARCHITECT_MAX_TOKENS,
    )
    logger.debug("Course architect raw output: %s", raw_text)
    return interpret(raw_text, lambda: fallback_custom_course(profile, now))
