"""Prompt builders for each generative feature.

JSON prompts spell out the exact payload shape expected back; the matching
pydantic models live in ``career_coach.dto.payloads``.
"""

from textwrap import dedent

from career_coach.entities import UserProfile


def _join(values, default: str = "") -> str:
    return ", ".join(values) or default


def cover_letter(job_title: str, company_name: str, job_description: str, profile: UserProfile) -> str:
    return dedent(f"""\
        Write a professional cover letter for a {job_title} position at {company_name}.

        About the candidate:
        - Industry: {profile.industry}
        - Years of Experience: {profile.experience}
        - Skills: {_join(profile.skills)}
        - Professional Background: {profile.bio}

        Job Description:
        {job_description}

        Requirements:
        1. Use a professional, enthusiastic tone
        2. Highlight relevant skills and experience
        3. Show understanding of the company's needs
        4. Keep it concise (max 400 words)
        5. Use proper business letter formatting in markdown
        6. Include specific examples of achievements
        7. Relate candidate's background to job requirements

        Format the letter in markdown.
        """)


def quiz(industry: str | None, skills) -> str:
    expertise = f" with expertise in {_join(skills)}" if skills else ""
    return dedent(f"""\
        Generate 10 technical interview questions for a {industry} professional{expertise}.

        Each question should be multiple choice with 4 options.

        Return the response in this JSON format only, no additional text:
        {{
          "questions": [
            {{
              "question": "string",
              "options": ["string", "string", "string", "string"],
              "correctAnswer": "string",
              "explanation": "string"
            }}
          ]
        }}
        """)


def job_questions(skills, job_description: str | None) -> str:
    return dedent(f"""\
        Generate 8 targeted interview questions for a job interview based on:

        Student's Skills: {_join(skills, "General skills")}
        Job Description: {job_description or "Not provided - generate general questions for their skills"}

        Create questions that:
        1. Match the job requirements if a job description is provided
        2. Test the candidate's actual technical skills
        3. Include behavioral and technical questions
        4. Are realistic for actual interviews

        Return the response in this JSON format only, no additional text:
        {{
          "questions": [
            {{
              "question": "string",
              "type": "technical",
              "context": "why this question is asked",
              "suggestedAnswer": "string",
              "tips": ["tip1", "tip2", "tip3"]
            }}
          ]
        }}
        """)


def industry_insights(industry: str) -> str:
    return dedent(f"""\
        Analyze the current state of the {industry} industry and provide insights in ONLY the following JSON format without any additional notes or explanations:
        {{
          "salaryRanges": [
            {{ "role": "string", "min": number, "max": number, "median": number, "location": "string" }}
          ],
          "growthRate": number,
          "demandLevel": "High" | "Medium" | "Low",
          "topSkills": ["skill1", "skill2"],
          "marketOutlook": "Positive" | "Neutral" | "Negative",
          "keyTrends": ["trend1", "trend2"],
          "recommendedSkills": ["skill1", "skill2"]
        }}

        IMPORTANT: Return ONLY the JSON. No additional text, notes, or markdown formatting.
        Include at least 5 common roles for salary ranges.
        Growth rate should be a percentage.
        Include at least 5 skills and trends.
        """)


def skill_roadmap(profile: UserProfile, skills_to_learn) -> str:
    return dedent(f"""\
        Create a detailed skill improvement roadmap for a professional to transition from their current skills to industry-required skills.

        Current Skills: {_join(profile.skills, "Basic fundamentals")}
        Industry: {profile.industry or "Technology"}
        Target Skills to Learn: {_join(skills_to_learn)}
        Years of Experience: {profile.experience or "Entry-level"}

        Generate a structured 3-phase roadmap with the following JSON format ONLY (no additional text):
        {{
          "phases": [
            {{
              "phase": 1,
              "name": "string (e.g., 'Foundation Building')",
              "duration": "string (e.g., '4 weeks')",
              "skills": ["skill1", "skill2"],
              "resources": [
                {{
                  "type": "course|project|practice|certification|tutorial|community",
                  "title": "string",
                  "platform": "string (e.g., Udemy, Coursera, GitHub)",
                  "duration": "string (e.g., '20 hours')"
                }}
              ],
              "milestone": "string (achievable goal for this phase)",
              "tips": "string (practical advice)"
            }}
          ]
        }}

        Requirements:
        1. Create exactly 3 phases (Foundation, Development, Mastery)
        2. Distribute skills across phases logically
        3. Include 3-4 realistic resources per phase
        4. Make milestones achievable and measurable
        5. Provide practical, actionable tips
        6. Estimate realistic timeframes based on skill difficulty
        """)


def coding_challenges(language: str, difficulty: str | None) -> str:
    level = f"{difficulty} " if difficulty else ""
    return dedent(f"""\
        Generate 5 {level}coding interview challenges to be solved in {language}.

        Return the response in this JSON format only, no additional text:
        {{
          "challenges": [
            {{
              "title": "string",
              "description": "string",
              "difficulty": "Easy" | "Medium" | "Hard",
              "language": "{language}",
              "category": "string (e.g., Arrays, Strings, Trees)",
              "starterCode": "string",
              "solution": "string",
              "testCases": [
                {{ "input": "string", "expectedOutput": "string", "explanation": "string" }}
              ],
              "hints": ["hint1", "hint2"]
            }}
          ]
        }}
        """)


def question_bank(
    company: str | None,
    category: str | None,
    difficulty: str | None,
    role: str | None,
    limit: int,
) -> str:
    filters = [
        f"{name}: {value}"
        for name, value in (
            ("Company", company),
            ("Category", category),
            ("Difficulty", difficulty),
            ("Role", role),
        )
        if value
    ]
    criteria = "\n".join(filters) or "No filters - cover a mix of companies and categories"
    return dedent(f"""\
        List up to {limit} frequently asked interview questions matching:
        {criteria}

        Categories are one of: DSA, System Design, Behavioral, Database.

        Return the response in this JSON format only, no additional text:
        {{
          "questions": [
            {{
              "question": "string",
              "answer": "string",
              "explanation": "string",
              "company": "string",
              "category": "string",
              "difficulty": "Easy" | "Medium" | "Hard",
              "role": "string",
              "tags": ["tag1", "tag2"],
              "frequency": number,
              "mostAskedBy": ["company1", "company2"]
            }}
          ]
        }}
        """)


def improvement_tip(industry: str | None, wrong_answers: list[dict]) -> str:
    """Prompt for a short tip based on the questions answered wrongly.

    Args:
        industry: The user's industry
        wrong_answers: Results with ``question``, ``answer`` and ``userAnswer``
    """
    mistakes = "\n\n".join(
        f'Question: "{r["question"]}"\nCorrect Answer: "{r["answer"]}"\nUser Answer: "{r["userAnswer"]}"'
        for r in wrong_answers
    )
    return (
        f"The user got the following {industry} technical interview questions wrong:\n\n"
        f"{mistakes}\n\n"
        "Based on these mistakes, provide a concise, specific improvement tip.\n"
        "Focus on the knowledge gaps revealed by these wrong answers.\n"
        "Keep the response under 2 sentences and make it encouraging.\n"
        "Don't explicitly mention the mistakes, instead focus on what to learn/practice.\n"
    )
