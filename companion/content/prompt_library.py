"""Curated prompt-library templates and lookup helpers"""
from typing import Dict, List, Optional

PROMPT_LIBRARY: List[Dict] = [
    {
        "id": "email-writer-pro",
        "title": "Professional Email Writer",
        "prompt_template": (
            "You are a professional communication expert. Write a [TYPE] email for the following situation:\n\n"
            "Context: [DESCRIBE THE SITUATION]\nRecipient: [WHO YOU'RE WRITING TO]\n"
            "Goal: [WHAT YOU WANT TO ACHIEVE]\nTone: [PROFESSIONAL/FRIENDLY/FORMAL]\n\n"
            "Write an email with a clear subject line, a purpose stated in the first paragraph, "
            "details in logical order and a clear call-to-action."
        ),
        "category": "Communication",
        "difficulty": "Beginner",
        "when_to_use": "When you need to write professional emails quickly and effectively",
        "why_it_works": "Provides a structure that covers every important element while keeping a professional tone",
        "tags": ["email", "communication", "professional", "business"],
        "rating": 4.8,
        "times_used": 1247,
        "is_featured": True,
        "author": "system",
        "created_at": "2024-01-15T10:00:00Z",
    },
    {
        "id": "difficult-conversation",
        "title": "Difficult Conversation Navigator",
        "prompt_template": (
            "You are an expert in conflict resolution. Help me prepare for this discussion:\n\n"
            "Situation: [DESCRIBE THE CONFLICT OR ISSUE]\nOther Party: [WHO AND THEIR PERSPECTIVE]\n"
            "Your Goal: [WHAT YOU WANT TO ACHIEVE]\nConstraints: [ANY SENSITIVITIES]\n\n"
            "Provide talking points, de-escalation phrases, questions to find common ground, likely "
            "objections with answers, and a suggested conversation flow."
        ),
        "category": "Communication",
        "difficulty": "Advanced",
        "when_to_use": "Before having difficult conversations at work or in personal relationships",
        "why_it_works": "Structures the conversation around empathy and problem-solving rather than blame",
        "tags": ["conflict-resolution", "difficult-conversations", "negotiation", "empathy"],
        "rating": 4.7,
        "times_used": 892,
        "is_featured": True,
        "author": "system",
        "created_at": "2024-01-20T14:30:00Z",
    },
    {
        "id": "meeting-facilitator",
        "title": "Meeting Facilitator",
        "prompt_template": (
            "You are an experienced meeting facilitator. Help me plan this meeting:\n\n"
            "Purpose: [WHY WE ARE MEETING]\nAttendees: [WHO IS COMING]\nDuration: [HOW LONG]\n\n"
            "Create an agenda with time boxes, discussion questions, decision points and a follow-up template."
        ),
        "category": "Communication",
        "difficulty": "Intermediate",
        "when_to_use": "When you need a focused meeting that ends with clear decisions",
        "why_it_works": "Time boxes and explicit decision points keep discussions on track",
        "tags": ["meetings", "facilitation", "planning"],
        "rating": 4.6,
        "times_used": 423,
        "is_featured": False,
        "author": "system",
        "created_at": "2024-01-24T09:00:00Z",
    },
    {
        "id": "blog-post-writer",
        "title": "Blog Post Writer",
        "prompt_template": (
            "You are a skilled content writer. Write a blog post:\n\n"
            "Topic: [TOPIC]\nAudience: [WHO WILL READ IT]\nLength: [WORD COUNT]\nKeywords: [SEO KEYWORDS]\n\n"
            "Include a compelling headline, an engaging introduction, scannable sections and a conclusion "
            "with a call-to-action."
        ),
        "category": "Content Creation",
        "difficulty": "Intermediate",
        "when_to_use": "When you need a well-structured first draft of a blog article",
        "why_it_works": "Audience and keyword context produce focused, searchable content",
        "tags": ["blogging", "writing", "seo", "content"],
        "rating": 4.7,
        "times_used": 1156,
        "is_featured": True,
        "author": "system",
        "created_at": "2024-01-26T13:15:00Z",
    },
    {
        "id": "social-media-creator",
        "title": "Social Media Post Creator",
        "prompt_template": (
            "You are a social media strategist. Create posts for [PLATFORM] about [TOPIC].\n\n"
            "Brand voice: [VOICE]\nGoal: [ENGAGEMENT/AWARENESS/CONVERSION]\n\n"
            "Write 5 post variations with hooks, hashtags and suggested visuals."
        ),
        "category": "Content Creation",
        "difficulty": "Beginner",
        "when_to_use": "When you need a batch of on-brand social posts",
        "why_it_works": "Variations let you test hooks without starting from scratch",
        "tags": ["social-media", "content", "marketing"],
        "rating": 4.5,
        "times_used": 987,
        "is_featured": False,
        "author": "system",
        "created_at": "2024-01-27T10:30:00Z",
    },
    {
        "id": "task-prioritizer",
        "title": "Smart Task Prioritizer",
        "prompt_template": (
            "You are a productivity expert specializing in task management. Help me prioritize my tasks:\n\n"
            "Current Tasks: [LIST ALL YOUR TASKS]\nDeadlines: [ANY SPECIFIC DEADLINES]\n"
            "Available Time: [HOW MUCH TIME YOU HAVE]\nEnergy Level: [HIGH/MEDIUM/LOW]\n\n"
            "Use the Eisenhower Matrix, match tasks to energy levels, and provide a clear daily schedule."
        ),
        "category": "Productivity",
        "difficulty": "Beginner",
        "when_to_use": "When you have multiple tasks and need help deciding what to work on first",
        "why_it_works": "Uses proven prioritization frameworks to match tasks with available time and energy",
        "tags": ["prioritization", "time-management", "planning", "focus"],
        "rating": 4.8,
        "times_used": 1234,
        "is_featured": True,
        "author": "system",
        "created_at": "2024-01-30T11:45:00Z",
    },
    {
        "id": "workflow-optimizer",
        "title": "Workflow Optimization Expert",
        "prompt_template": (
            "You are a process improvement expert. Help me optimize this workflow:\n\n"
            "Current Process: [DESCRIBE YOUR WORKFLOW STEP BY STEP]\nPain Points: [WHAT IS SLOW]\n"
            "Tools Available: [TOOLS/SOFTWARE]\nSuccess Metrics: [HOW YOU MEASURE SUCCESS]\n\n"
            "Map the current state, find bottlenecks, propose automation and an implementation roadmap."
        ),
        "category": "Productivity",
        "difficulty": "Advanced",
        "when_to_use": "When a recurring process feels slow or error-prone",
        "why_it_works": "Mapping the current state first exposes the real bottlenecks",
        "tags": ["workflow", "automation", "process-improvement", "efficiency"],
        "rating": 4.6,
        "times_used": 445,
        "is_featured": False,
        "author": "system",
        "created_at": "2024-01-31T15:20:00Z",
    },
    {
        "id": "problem-solving-framework",
        "title": "Strategic Problem Solver",
        "prompt_template": (
            "You are a strategic consultant with expertise in problem-solving frameworks. Help me solve this problem:\n\n"
            "Problem Statement: [DESCRIBE THE PROBLEM]\nContext: [BACKGROUND]\nConstraints: [LIMITATIONS]\n"
            "Stakeholders: [WHO'S AFFECTED]\nTimeline: [WHEN A SOLUTION IS NEEDED]\n\n"
            "Analyze root causes, generate 3-5 solutions with pros and cons, recommend one, and list next steps."
        ),
        "category": "Decision Making",
        "difficulty": "Advanced",
        "when_to_use": "When facing complex business or personal problems that need systematic analysis",
        "why_it_works": "Uses consulting frameworks to break complex problems into manageable components",
        "tags": ["problem-solving", "strategy", "analysis", "decision-making"],
        "rating": 4.9,
        "times_used": 423,
        "is_featured": True,
        "author": "system",
        "created_at": "2024-02-01T16:45:00Z",
    },
    {
        "id": "decision-matrix",
        "title": "Decision Matrix Creator",
        "prompt_template": (
            "You are a decision analysis expert. Help me make this decision:\n\n"
            "Decision: [WHAT YOU NEED TO DECIDE]\nOptions: [ALL POSSIBLE CHOICES]\n"
            "Important Factors: [WHAT MATTERS MOST]\n\n"
            "Weight each factor, score every option, and explain the recommended choice."
        ),
        "category": "Decision Making",
        "difficulty": "Intermediate",
        "when_to_use": "When comparing several options against multiple criteria",
        "why_it_works": "Weighted scoring makes trade-offs explicit",
        "tags": ["decision-making", "analysis", "comparison"],
        "rating": 4.6,
        "times_used": 567,
        "is_featured": False,
        "author": "system",
        "created_at": "2024-02-03T10:00:00Z",
    },
    {
        "id": "concept-explainer",
        "title": "Complex Concept Simplifier",
        "prompt_template": (
            "You are an expert educator who makes complex topics simple. Help me understand:\n\n"
            "Topic/Concept: [WHAT YOU WANT TO UNDERSTAND]\nMy Background: [CURRENT KNOWLEDGE LEVEL]\n"
            "Preferred Style: [ANALOGIES/EXAMPLES/STEP-BY-STEP]\n\n"
            "Give a simple definition, building blocks, analogies, common misconceptions and practice ideas."
        ),
        "category": "Learning",
        "difficulty": "Beginner",
        "when_to_use": "When you need to understand complex concepts quickly and thoroughly",
        "why_it_works": "Uses multiple learning modalities for better comprehension",
        "tags": ["explanation", "understanding", "education", "simplification"],
        "rating": 4.7,
        "times_used": 1023,
        "is_featured": True,
        "author": "system",
        "created_at": "2024-02-16T09:45:00Z",
    },
    {
        "id": "business-model-analyzer",
        "title": "Business Model Canvas Creator",
        "prompt_template": (
            "You are a business strategy expert. Help me develop a business model canvas for:\n\n"
            "Business Idea: [DESCRIBE THE BUSINESS]\nTarget Market: [WHO YOU SERVE]\n\n"
            "Fill in all nine canvas blocks and highlight the riskiest assumptions."
        ),
        "category": "Business Strategy",
        "difficulty": "Advanced",
        "when_to_use": "When validating a new business or product idea",
        "why_it_works": "The canvas forces every part of the model to be stated explicitly",
        "tags": ["business", "strategy", "planning", "startup"],
        "rating": 4.8,
        "times_used": 445,
        "is_featured": True,
        "author": "system",
        "created_at": "2024-02-20T14:00:00Z",
    },
    {
        "id": "goal-setting-coach",
        "title": "SMART Goal Setting Coach",
        "prompt_template": (
            "You are a personal development coach specializing in goal achievement. Help me plan this goal:\n\n"
            "Goal Area: [CAREER/HEALTH/FINANCIAL/PERSONAL]\nCurrent Situation: [WHERE YOU ARE NOW]\n"
            "Desired Outcome: [WHAT YOU WANT]\nTimeline: [WHEN]\n\n"
            "Refine it into a SMART goal, analyze obstacles, build an action plan and an accountability system."
        ),
        "category": "Personal Development",
        "difficulty": "Intermediate",
        "when_to_use": "When starting a new goal or restarting one that stalled",
        "why_it_works": "Pairs a concrete plan with obstacles and accountability up front",
        "tags": ["goals", "planning", "motivation", "personal-development"],
        "rating": 4.7,
        "times_used": 892,
        "is_featured": True,
        "author": "system",
        "created_at": "2024-02-25T08:30:00Z",
    },
]

DIFFICULTIES = ("Beginner", "Intermediate", "Advanced")


def get_prompts_by_category(category: str) -> List[Dict]:
    return [prompt for prompt in PROMPT_LIBRARY if prompt["category"] == category]


def get_featured_prompts() -> List[Dict]:
    return [prompt for prompt in PROMPT_LIBRARY if prompt["is_featured"]]


def get_prompts_by_difficulty(difficulty: str) -> List[Dict]:
    return [prompt for prompt in PROMPT_LIBRARY if prompt["difficulty"] == difficulty]


def search_prompts(query: str) -> List[Dict]:
    """Case-insensitive match against title, template text, tags and category."""
    q = query.lower()
    return [
        prompt for prompt in PROMPT_LIBRARY
        if q in prompt["title"].lower()
        or q in prompt["prompt_template"].lower()
        or any(q in tag.lower() for tag in prompt["tags"])
        or q in prompt["category"].lower()
    ]


def get_unique_categories() -> List[str]:
    return sorted({prompt["category"] for prompt in PROMPT_LIBRARY})


def get_unique_tags() -> List[str]:
    return sorted({tag for prompt in PROMPT_LIBRARY for tag in prompt["tags"]})


def get_prompt_by_id(prompt_id: str) -> Optional[Dict]:
    return next((prompt for prompt in PROMPT_LIBRARY if prompt["id"] == prompt_id), None)


def filter_library(
    category: Optional[str] = None,
    difficulty: Optional[str] = None,
    tags: Optional[List[str]] = None,
    search: Optional[str] = None,
    featured: bool = False,
) -> List[Dict]:
    """
    Apply library filters in order: search, category, difficulty, featured, tags.

    'all' for category or difficulty means no filter. A prompt matches the tag
    filter when it carries any of the requested tags.
    """
    prompts = search_prompts(search) if search else list(PROMPT_LIBRARY)

    if category and category != "all":
        prompts = [p for p in prompts if p["category"] == category]

    if difficulty and difficulty != "all":
        prompts = [p for p in prompts if p["difficulty"] == difficulty]

    if featured:
        prompts = [p for p in prompts if p["is_featured"]]

    if tags:
        prompts = [p for p in prompts if any(tag in p["tags"] for tag in tags)]

    return prompts
