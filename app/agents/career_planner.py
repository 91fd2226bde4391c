# app/agents/career_planner.py
import logging

from app.agents.interpreter import interpret
from app.agents.llm.base import LLMClient
from app.agents.schemas import (
    AIInsights,
    CareerRoadmap,
    Course,
    CourseModule,
    Recommendation,
    Roadmap,
)
from app.leads.schemas import CareerProfile

logger = logging.getLogger(__name__)

PLANNER_TEMPERATURE = 0.7
PLANNER_MAX_TOKENS = 1500

SYSTEM_CAREER_PLANNER = """You are ScalerAI, an AI career acceleration system.
You create personalized learning roadmaps made of progressive courses.

Return a JSON object with this exact structure:

{
  "roadmap": {
    "title": "Your AI-Powered Career Acceleration Path",
    "currentLevel": "Current position assessment",
    "targetLevel": "Target position in 12-18 months",
    "estimatedTimeframe": "X-Y months",
    "confidenceScore": 95,
    "salaryIncrease": "Expected % salary increase",
    "courses": [
      {
        "id": "course_1",
        "title": "Foundation Course Title",
        "description": "Course description",
        "difficulty": "Beginner|Intermediate|Advanced",
        "duration": "X weeks",
        "price": 299,
        "originalPrice": 599,
        "rating": 4.8,
        "students": 15420,
        "isPremium": true,
        "technologies": ["React", "Node.js", "PostgreSQL"],
        "outcomes": ["Specific skill outcome 1", "Specific skill outcome 2"],
        "modules": [
          {
            "moduleNumber": 1,
            "title": "Getting Started Module",
            "topics": ["Topic 1", "Topic 2", "Topic 3"],
            "duration": "8 hours",
            "isPreview": true,
            "requiresPremium": false,
            "practicalProjects": ["Project 1", "Project 2"]
          },
          {
            "moduleNumber": 3,
            "title": "Advanced Implementation",
            "topics": ["Advanced Topic 1", "Advanced Topic 2"],
            "duration": "15 hours",
            "isPreview": false,
            "requiresPremium": true,
            "practicalProjects": ["Industry-level Project"]
          }
        ]
      }
    ]
  },
  "aiInsights": {
    "careerAnalysis": "Analysis of their career trajectory",
    "marketDemand": "Current market demand for their target role",
    "competitiveAdvantage": "What will set them apart from other candidates"
  },
  "nextSteps": [
    "Immediate action they should take today",
    "Action for this week",
    "Action for this month"
  ],
  "skillGaps": ["Critical skill gap 1", "Important skill gap 2"],
  "recommendations": [
    {
      "id": "1",
      "type": "masterclass",
      "title": "Specific free masterclass recommendation",
      "description": "Why this free masterclass is a good starting point",
      "priority": "high",
      "estimatedTime": "2 hours",
      "isFree": true
    }
  ]
}
"""


def build_career_prompt(profile: CareerProfile) -> str:
    tech_stack = ", ".join(profile.preferred_tech_stack) or "Not specified"
    return f"""
Create a personalized career roadmap for:

Name: {profile.name or "Not specified"}
Current Role: {profile.current_role}
Experience Level: {profile.experience_level or "Not specified"}
Career Goals: {profile.career_goals}
Tech Stack Interest: {tech_stack}

Create 3-4 progressive courses that build upon each other. Each course should have:
- 4-6 modules total
- First 2 modules free (isPreview true, requiresPremium false)
- Remaining modules premium (isPreview false, requiresPremium true)
- Specific technologies and practical projects
- Clear learning outcomes
- Pricing between $199 and $499 per course
""".strip()


def fallback_career_roadmap(profile: CareerProfile) -> dict:
    """Hand-authored roadmap echoing the requester's role and technologies."""
    technologies = profile.preferred_tech_stack or ["Programming Fundamentals"]
    current_level = profile.current_role or "Aspiring professional"

    roadmap = CareerRoadmap(
        roadmap=Roadmap(
            title="Your AI-Powered Career Acceleration Path",
            current_level=current_level,
            target_level="Senior role aligned with your career goals",
            estimated_timeframe="6-12 months",
            confidence_score=85,
            salary_increase="30-50%",
            courses=[
                Course(
                    id="course_1",
                    title="Foundations in Your Preferred Stack",
                    description="Master the fundamental technologies in your preferred stack",
                    difficulty="Beginner",
                    duration="6 weeks",
                    price=299,
                    original_price=599,
                    rating=4.8,
                    students=12500,
                    is_premium=True,
                    technologies=technologies,
                    outcomes=[
                        "Confident use of core tools and workflows",
                        "A first portfolio project",
                    ],
                    modules=[
                        CourseModule(
                            module_number=1,
                            title="Getting Started",
                            topics=["Environment Setup", "Core Concepts", "Tooling"],
                            duration="8 hours",
                            is_preview=True,
                            requires_premium=False,
                            practical_projects=["Setup Project"],
                        ),
                        CourseModule(
                            module_number=2,
                            title="Core Skills",
                            topics=["Best Practices", "Debugging", "Testing"],
                            duration="12 hours",
                            is_preview=True,
                            requires_premium=False,
                            practical_projects=["Mini Project"],
                        ),
                        CourseModule(
                            module_number=3,
                            title="Applied Projects",
                            topics=["Real-world Applications", "Code Review"],
                            duration="15 hours",
                            is_preview=False,
                            requires_premium=True,
                            practical_projects=["Portfolio Project"],
                        ),
                        CourseModule(
                            module_number=4,
                            title="Professional Mastery",
                            topics=["System Design", "Performance", "Interview Preparation"],
                            duration="20 hours",
                            is_preview=False,
                            requires_premium=True,
                            practical_projects=["Capstone Project", "Interview Prep"],
                        ),
                    ],
                ),
            ],
        ),
        ai_insights=AIInsights(
            career_analysis=f"Moving on from {current_level} calls for deeper hands-on experience",
            market_demand="Demand for skilled practitioners in your target area remains strong",
            competitive_advantage="A portfolio of practical projects sets you apart",
        ),
        next_steps=[
            "Step 1: Master fundamental technologies in your preferred stack",
            "Step 2: Build portfolio projects demonstrating your skills",
            "Step 3: Apply to relevant positions or advance in current role",
        ],
        skill_gaps=["Hands-on project experience", "System design"],
        recommendations=[
            Recommendation(
                id="1",
                type="masterclass",
                title="Roadmap to Data Engineering Mastery",
                description="Perfect for advancing your technical skills",
                priority="high",
                estimated_time="2 hours",
                is_free=True,
            ),
            Recommendation(
                id="2",
                type="masterclass",
                title="Full Stack Development Bootcamp Preview",
                description="Builds comprehensive development skills",
                priority="medium",
                estimated_time="2 hours",
                is_free=True,
            ),
        ],
    )
    return roadmap.to_payload()


def generate_career_roadmap(llm: LLMClient, profile: CareerProfile) -> dict:
    raw_text = llm.generate_text(
        system=SYSTEM_CAREER_PLANNER,
        user=build_career_prompt(profile),
        temperature=PLANNER_TEMPERATURE,
        max_tokens=PLANNER_MAX_TOKENS,
    )
    logger.debug("Career planner raw output: %s", raw_text)
    return interpret(raw_text, lambda: fallback_career_roadmap(profile))


def recommended_titles(roadmap: dict) -> list[str]:
    """Titles of the roadmap's recommendations, skipping malformed entries."""
    recommendations = roadmap.get("recommendations")
    if not isinstance(recommendations, list):
        return []
    return [
        r["title"] for r in recommendations
        if isinstance(r, dict) and isinstance(r.get("title"), str)
    ]
