"""Static fallback payloads used when live generation is unavailable.

Every builder here is pure: no I/O, no generation calls, no exceptions for
any input. Builders return fresh objects so callers may mutate the result
without touching the shared tables.
"""

import copy

from career_coach.entities import UserProfile

DEFAULT_INDUSTRY = "Software Development"

QUIZ_QUESTIONS = [
    {
        "question": "What is the primary purpose of a database index?",
        "options": [
            "To increase storage space",
            "To speed up data retrieval operations",
            "To enforce data integrity",
            "To reduce memory usage",
        ],
        "correctAnswer": "To speed up data retrieval operations",
        "explanation": "Database indexes create a data structure that allows faster lookups, similar to how a book's index helps you find topics quickly.",
    },
    {
        "question": "Which of the following best describes REST API?",
        "options": [
            "A database management system",
            "A programming language",
            "An architectural style for building web services using HTTP methods",
            "A type of security protocol",
        ],
        "correctAnswer": "An architectural style for building web services using HTTP methods",
        "explanation": "REST (Representational State Transfer) uses HTTP methods (GET, POST, PUT, DELETE) to perform operations on resources.",
    },
    {
        "question": "What is the time complexity of binary search?",
        "options": ["O(n)", "O(log n)", "O(n log n)", "O(n²)"],
        "correctAnswer": "O(log n)",
        "explanation": "Binary search divides the search space in half with each iteration, resulting in logarithmic time complexity.",
    },
    {
        "question": "In object-oriented programming, what is encapsulation?",
        "options": [
            "Wrapping data and methods into a single unit while hiding internal details",
            "Creating multiple copies of the same class",
            "Defining abstract methods in a class",
            "Inheriting properties from a parent class",
        ],
        "correctAnswer": "Wrapping data and methods into a single unit while hiding internal details",
        "explanation": "Encapsulation bundles data (attributes) and methods together, controlling access through visibility modifiers.",
    },
    {
        "question": "What does ACID stand for in database transactions?",
        "options": [
            "Atomicity, Consistency, Isolation, Durability",
            "Authorization, Compression, Indexing, Delegation",
            "Accuracy, Capability, Integration, Distribution",
            "Architecture, Compatibility, Implementation, Design",
        ],
        "correctAnswer": "Atomicity, Consistency, Isolation, Durability",
        "explanation": "ACID properties ensure reliable database transactions: Atomicity (all-or-nothing), Consistency (valid states), Isolation (independence), Durability (permanent).",
    },
    {
        "question": "What is the main advantage of using version control systems like Git?",
        "options": [
            "Faster code execution",
            "Automatic bug detection",
            "Track changes, enable collaboration, and maintain project history",
            "Reduce code file size",
        ],
        "correctAnswer": "Track changes, enable collaboration, and maintain project history",
        "explanation": "Version control allows teams to work together, revert changes, and maintain a complete history of project evolution.",
    },
    {
        "question": "Which design pattern is used to create objects without specifying their exact classes?",
        "options": ["Observer Pattern", "Factory Pattern", "Singleton Pattern", "Strategy Pattern"],
        "correctAnswer": "Factory Pattern",
        "explanation": "The Factory Pattern defines an interface for creating objects, letting subclasses decide the concrete type.",
    },
    {
        "question": "What is the purpose of middleware in web applications?",
        "options": [
            "To store user data",
            "To process requests and responses between client and server",
            "To render HTML pages",
            "To encrypt passwords",
        ],
        "correctAnswer": "To process requests and responses between client and server",
        "explanation": "Middleware intercepts requests/responses, enabling authentication, logging, error handling, and other cross-cutting concerns.",
    },
    {
        "question": "In machine learning, what does overfitting mean?",
        "options": [
            "The model has too few parameters",
            "The model learns the training data too well, including noise, and performs poorly on new data",
            "The model is too simple for the problem",
            "The training process stopped too early",
        ],
        "correctAnswer": "The model learns the training data too well, including noise, and performs poorly on new data",
        "explanation": "Overfitting occurs when a model memorizes training data details rather than learning generalizable patterns.",
    },
    {
        "question": "What is the difference between SQL and NoSQL databases?",
        "options": [
            "SQL is faster than NoSQL",
            "SQL uses tables and predefined schemas; NoSQL uses flexible document-based or key-value structures",
            "NoSQL is more secure",
            "They serve the same purpose exactly",
        ],
        "correctAnswer": "SQL uses tables and predefined schemas; NoSQL uses flexible document-based or key-value structures",
        "explanation": "SQL databases enforce strict schemas with tables and relationships, while NoSQL offers flexibility in data structure and scaling.",
    },
]


def _job_questions(skills: str) -> list[dict]:
    return [
        {
            "question": "Tell me about a challenging project you've worked on and how you solved it.",
            "type": "behavioral",
            "context": "Assesses problem-solving skills and communication abilities",
            "suggestedAnswer": "Describe a specific project, the challenge faced, your approach, and the outcome. Use the STAR method (Situation, Task, Action, Result).",
            "tips": ["Be specific with details", "Show your contributions clearly", "Mention what you learned from the experience"],
        },
        {
            "question": f"Explain how you would approach learning a new {skills or 'technology or framework'} in your free time.",
            "type": "behavioral",
            "context": "Shows commitment to continuous learning and self-improvement",
            "suggestedAnswer": "Discuss your learning strategies: reading documentation, building projects, following tutorials, or contributing to open source.",
            "tips": ["Highlight your proactive approach", "Mention resources you typically use", "Give examples of skills you've learned recently"],
        },
        {
            "question": "How do you handle conflicts or disagreements with team members?",
            "type": "behavioral",
            "context": "Evaluates teamwork and interpersonal skills",
            "suggestedAnswer": "Explain your approach: listen actively, understand different perspectives, find common ground, and escalate if needed.",
            "tips": ["Show empathy and understanding", "Provide a real example if possible", "Emphasize collaboration over blame"],
        },
        {
            "question": "Describe your experience with version control and collaboration in team projects.",
            "type": "technical",
            "context": "Tests understanding of development workflows and teamwork",
            "suggestedAnswer": "Discuss Git/GitHub experience, pull requests, code reviews, and how you handle merge conflicts.",
            "tips": ["Mention specific tools you've used", "Show understanding of best practices", "Discuss branch naming conventions if applicable"],
        },
        {
            "question": "How do you approach debugging and troubleshooting code issues?",
            "type": "technical",
            "context": "Shows problem-solving methodology and attention to detail",
            "suggestedAnswer": "Explain your debugging process: reproduce the issue, use debugging tools, check logs, eliminate variables, and test solutions.",
            "tips": ["Mention tools and techniques you use", "Show systematic thinking", "Give an example from past experience"],
        },
        {
            "question": "What interests you about this role and our company?",
            "type": "behavioral",
            "context": "Assesses genuine interest and research",
            "suggestedAnswer": "Research the company and role. Mention specific projects, values, or problems you want to solve with them.",
            "tips": ["Be specific and sincere", "Show understanding of the company's mission", "Connect their needs with your skills"],
        },
        {
            "question": "Describe a time when you had to learn something quickly to meet a deadline.",
            "type": "behavioral",
            "context": "Evaluates adaptability and pressure handling",
            "suggestedAnswer": "Share an example where you rapidly acquired new knowledge, your learning methods, and the successful outcome.",
            "tips": ["Show resilience under pressure", "Highlight your learning speed", "Mention how you applied the knowledge"],
        },
        {
            "question": "What are your strengths and areas for improvement as a developer?",
            "type": "behavioral",
            "context": "Tests self-awareness and growth mindset",
            "suggestedAnswer": "Be honest about strengths with examples. For improvements, show you're actively working to develop them.",
            "tips": ["Choose real, relevant strengths", "Don't mention critical weaknesses", "Show concrete improvement efforts"],
        },
    ]


INDUSTRY_SKILLS = {
    "Software Development": {
        "topSkills": ["JavaScript", "React", "Node.js", "Python", "TypeScript"],
        "recommendedSkills": ["Cloud platforms (AWS, GCP, Azure)", "Docker", "Kubernetes", "REST APIs", "Database design"],
    },
    "Data Science": {
        "topSkills": ["Python", "Machine Learning", "TensorFlow", "SQL", "Statistics"],
        "recommendedSkills": ["Data visualization (Tableau, Power BI)", "Big Data tools (Spark, Hadoop)", "Data preprocessing", "Statistical analysis", "Deep learning"],
    },
    "Finance": {
        "topSkills": ["Excel", "Financial Analysis", "Risk Management", "Python", "SQL"],
        "recommendedSkills": ["Bloomberg Terminal", "VBA", "Financial modeling", "Valuation", "Regulatory compliance"],
    },
    "Healthcare": {
        "topSkills": ["Patient Care", "Electronic Health Records (EHR)", "Clinical Knowledge", "Communication", "HIPAA Compliance"],
        "recommendedSkills": ["Medical coding", "Healthcare IT systems", "Patient advocacy", "Medical terminology", "Care coordination"],
    },
    "Marketing": {
        "topSkills": ["Digital Marketing", "SEO/SEM", "Analytics", "Content Creation", "Social Media Management"],
        "recommendedSkills": ["Google Analytics", "Adobe Creative Suite", "Copywriting", "Marketing automation", "Brand strategy"],
    },
    "Sales": {
        "topSkills": ["Negotiation", "CRM (Salesforce)", "Customer Relationship Management", "Communication", "Market Knowledge"],
        "recommendedSkills": ["Sales forecasting", "Territory management", "Pipeline management", "B2B/B2C strategies", "Closing techniques"],
    },
    "Project Management": {
        "topSkills": ["Agile", "Scrum", "Risk Management", "Stakeholder Communication", "JIRA/Monday.com"],
        "recommendedSkills": ["PMP certification", "Lean methodology", "Budget management", "Team leadership", "Resource planning"],
    },
    "Human Resources": {
        "topSkills": ["Recruitment", "Employee Relations", "HR Systems", "Compliance", "Compensation & Benefits"],
        "recommendedSkills": ["HRIS platforms", "Training & development", "Performance management", "Labor law", "Employee engagement"],
    },
    "Cybersecurity": {
        "topSkills": ["Network Security", "Penetration Testing", "Security Protocols", "Encryption", "Incident Response"],
        "recommendedSkills": ["Ethical hacking", "Security information and event management (SIEM)", "Firewalls", "Threat analysis", "Security compliance"],
    },
    "DevOps": {
        "topSkills": ["Docker", "Kubernetes", "CI/CD Pipelines", "AWS/Azure", "Linux"],
        "recommendedSkills": ["Infrastructure as Code (Terraform)", "Monitoring tools (Prometheus)", "Automation", "Container orchestration", "Cloud architecture"],
    },
}


def _role(role: str, low: int, high: int, median: int, location: str) -> dict:
    return {"role": role, "min": low, "max": high, "median": median, "location": location}


INDUSTRY_SALARIES = {
    "Software Development": [
        _role("Junior Developer", 50000, 70000, 60000, "Remote"),
        _role("Senior Developer", 100000, 150000, 125000, "Remote"),
        _role("Tech Lead", 120000, 170000, 145000, "Remote"),
        _role("Solution Architect", 130000, 180000, 155000, "On-site"),
        _role("DevOps Engineer", 90000, 140000, 115000, "Remote"),
    ],
    "Data Science": [
        _role("Junior Data Analyst", 55000, 75000, 65000, "Remote"),
        _role("Data Scientist", 90000, 130000, 110000, "Remote"),
        _role("Senior Data Scientist", 120000, 180000, 150000, "Remote"),
        _role("ML Engineer", 100000, 160000, 130000, "Remote"),
        _role("Analytics Manager", 110000, 160000, 135000, "On-site"),
    ],
    "Finance": [
        _role("Financial Analyst", 60000, 85000, 72000, "On-site"),
        _role("Investment Banker", 80000, 200000, 140000, "On-site"),
        _role("Risk Manager", 90000, 150000, 120000, "On-site"),
        _role("Financial Advisor", 70000, 120000, 95000, "On-site"),
        _role("CFO", 150000, 300000, 225000, "On-site"),
    ],
    "Healthcare": [
        _role("Registered Nurse", 55000, 75000, 65000, "On-site"),
        _role("Physician", 200000, 400000, 300000, "On-site"),
        _role("Medical Technologist", 45000, 65000, 55000, "On-site"),
        _role("Healthcare Administrator", 70000, 120000, 95000, "On-site"),
        _role("Clinical Manager", 90000, 140000, 115000, "On-site"),
    ],
    "Marketing": [
        _role("Marketing Coordinator", 40000, 55000, 47500, "Remote"),
        _role("Digital Marketing Manager", 60000, 90000, 75000, "Remote"),
        _role("Content Strategist", 55000, 85000, 70000, "Remote"),
        _role("Marketing Director", 100000, 160000, 130000, "On-site"),
        _role("CMO", 130000, 250000, 190000, "On-site"),
    ],
}

ROADMAP_PHASES = [
    {
        "phase": 1,
        "name": "Foundation Building (Month 1)",
        "duration": "4 weeks",
        "resources": [
            {"type": "course", "title": "Complete Intro Course", "platform": "Udemy", "duration": "20 hours"},
            {"type": "documentation", "title": "Official Documentation", "platform": "Official Docs", "duration": "Self-paced"},
            {"type": "practice", "title": "Basic Exercises", "platform": "LeetCode", "duration": "10 hours"},
        ],
        "milestone": "Complete 2-3 small projects demonstrating basic understanding",
        "tips": "Focus on understanding fundamentals before moving to advanced topics",
    },
    {
        "phase": 2,
        "name": "Skill Development (Month 2-3)",
        "duration": "8 weeks",
        "resources": [
            {"type": "course", "title": "Advanced Concepts", "platform": "Coursera", "duration": "30 hours"},
            {"type": "project", "title": "Build Real Project", "platform": "Self-directed", "duration": "40 hours"},
            {"type": "tutorial", "title": "Advanced Tutorials", "platform": "YouTube/Blogs", "duration": "15 hours"},
        ],
        "milestone": "Build 1-2 portfolio projects showcasing new skills",
        "tips": "Implement real-world use cases and contribute to open source",
    },
    {
        "phase": 3,
        "name": "Mastery & Specialization (Month 4-6)",
        "duration": "12 weeks",
        "resources": [
            {"type": "certification", "title": "Professional Certification", "platform": "Official Cert", "duration": "prep: 50 hours"},
            {"type": "advanced", "title": "Advanced Projects", "platform": "Self-directed", "duration": "60 hours"},
            {"type": "community", "title": "Community Contribution", "platform": "Open Source/Communities", "duration": "Ongoing"},
        ],
        "milestone": "Achieve certification and complete 2+ advanced projects",
        "tips": "Teach others, mentor juniors, and establish yourself as an expert",
    },
]

# Skill slices per roadmap phase: first two, next two, the rest.
ROADMAP_SKILL_SLICES = (slice(0, 2), slice(2, 4), slice(4, None))

CODING_CHALLENGES = [
    {
        "title": "Two Sum",
        "description": "Given an array of integers nums and an integer target, return the indices of the two numbers that add up to target.",
        "difficulty": "Easy",
        "category": "Arrays",
        "starterCode": "function twoSum(nums, target) {\n  // Write your code here\n}",
        "solution": (
            "function twoSum(nums, target) {\n"
            "  const map = new Map();\n"
            "  for (let i = 0; i < nums.length; i++) {\n"
            "    const complement = target - nums[i];\n"
            "    if (map.has(complement)) {\n"
            "      return [map.get(complement), i];\n"
            "    }\n"
            "    map.set(nums[i], i);\n"
            "  }\n"
            "  return [];\n"
            "}"
        ),
        "testCases": [
            {"input": "nums = [2,7,11,15], target = 9", "expectedOutput": "[0,1]", "explanation": "nums[0] + nums[1] == 9"},
            {"input": "nums = [3,2,4], target = 6", "expectedOutput": "[1,2]", "explanation": "nums[1] + nums[2] == 6"},
            {"input": "nums = [3,3], target = 6", "expectedOutput": "[0,1]", "explanation": "nums[0] + nums[1] == 6"},
        ],
        "hints": ["Use a hash map to store values and their indices", "For each number, check if complement exists in map"],
    },
    {
        "title": "Valid Parentheses",
        "description": "Given a string s containing just the characters '(', ')', '{', '}', '[' and ']', determine if the input string is valid.",
        "difficulty": "Easy",
        "category": "Strings",
        "starterCode": "function isValid(s) {\n  // Write your code here\n}",
        "solution": (
            "function isValid(s) {\n"
            "  const stack = [];\n"
            "  const mapping = { ')': '(', '}': '{', ']': '[' };\n"
            "  for (let char of s) {\n"
            "    if (mapping[char]) {\n"
            "      if (!stack.length || stack.pop() !== mapping[char]) return false;\n"
            "    } else {\n"
            "      stack.push(char);\n"
            "    }\n"
            "  }\n"
            "  return stack.length === 0;\n"
            "}"
        ),
        "testCases": [
            {"input": 's = "()"', "expectedOutput": "true", "explanation": "Simple valid parentheses"},
            {"input": 's = "()[]{}"', "expectedOutput": "true", "explanation": "All types valid and balanced"},
            {"input": 's = "(]"', "expectedOutput": "false", "explanation": "Mismatched parentheses"},
        ],
        "hints": ["Use a stack to keep track of opening brackets", "Match closing brackets with the most recent opening bracket"],
    },
    {
        "title": "Merge Sorted Array",
        "description": "Merge two sorted integer arrays nums1 and nums2 into a single sorted array.",
        "difficulty": "Easy",
        "category": "Arrays",
        "starterCode": "function merge(nums1, m, nums2, n) {\n  // Write your code here\n}",
        "solution": (
            "function merge(nums1, m, nums2, n) {\n"
            "  let p1 = m - 1;\n"
            "  let p2 = n - 1;\n"
            "  let p = m + n - 1;\n"
            "  while (p1 >= 0 && p2 >= 0) {\n"
            "    if (nums1[p1] > nums2[p2]) {\n"
            "      nums1[p--] = nums1[p1--];\n"
            "    } else {\n"
            "      nums1[p--] = nums2[p2--];\n"
            "    }\n"
            "  }\n"
            "  while (p2 >= 0) {\n"
            "    nums1[p--] = nums2[p2--];\n"
            "  }\n"
            "}"
        ),
        "testCases": [
            {"input": "nums1 = [1,2,3,0,0,0], m = 3, nums2 = [2,5,6], n = 3", "expectedOutput": "[1,2,2,3,5,6]", "explanation": "Merged and sorted"},
            {"input": "nums1 = [1]", "expectedOutput": "[1]", "explanation": "Single element"},
        ],
        "hints": ["Compare elements from the end of both arrays", "Work backwards to place elements in nums1"],
    },
    {
        "title": "Binary Search",
        "description": "Given a sorted array of integers, find the target value. Return its index if found, else return -1.",
        "difficulty": "Medium",
        "category": "Searching",
        "starterCode": "function search(nums, target) {\n  // Write your code here\n}",
        "solution": (
            "function search(nums, target) {\n"
            "  let left = 0, right = nums.length - 1;\n"
            "  while (left <= right) {\n"
            "    const mid = Math.floor((left + right) / 2);\n"
            "    if (nums[mid] === target) return mid;\n"
            "    if (nums[mid] < target) left = mid + 1;\n"
            "    else right = mid - 1;\n"
            "  }\n"
            "  return -1;\n"
            "}"
        ),
        "testCases": [
            {"input": "nums = [-1,0,3,5,9,12], target = 9", "expectedOutput": "4", "explanation": "Target found at index 4"},
            {"input": "nums = [-1,0,3,5,9,12], target = 13", "expectedOutput": "-1", "explanation": "Target not in array"},
        ],
        "hints": ["Use binary search to achieve O(log n) time complexity", "Eliminate half of remaining elements at each step"],
    },
    {
        "title": "Longest Substring Without Repeating Characters",
        "description": "Find the length of the longest substring without repeating characters.",
        "difficulty": "Medium",
        "category": "Strings",
        "starterCode": "function lengthOfLongestSubstring(s) {\n  // Write your code here\n}",
        "solution": (
            "function lengthOfLongestSubstring(s) {\n"
            "  const charIndex = new Map();\n"
            "  let maxLength = 0;\n"
            "  let left = 0;\n"
            "  for (let right = 0; right < s.length; right++) {\n"
            "    if (charIndex.has(s[right])) {\n"
            "      left = Math.max(left, charIndex.get(s[right]) + 1);\n"
            "    }\n"
            "    charIndex.set(s[right], right);\n"
            "    maxLength = Math.max(maxLength, right - left + 1);\n"
            "  }\n"
            "  return maxLength;\n"
            "}"
        ),
        "testCases": [
            {"input": 's = "abcabcbb"', "expectedOutput": "3", "explanation": '"abc" is longest'},
            {"input": 's = "bbbbb"', "expectedOutput": "1", "explanation": '"b" is longest'},
            {"input": 's = "pwwkew"', "expectedOutput": "3", "explanation": '"wke" is longest'},
        ],
        "hints": ["Use sliding window with two pointers", "Use a map to track character positions"],
    },
]


def _bank(question, answer, explanation, company, category, difficulty, tags, frequency, most_asked_by) -> dict:
    return {
        "question": question,
        "answer": answer,
        "explanation": explanation,
        "company": company,
        "category": category,
        "difficulty": difficulty,
        "role": "Software Engineer",
        "tags": tags,
        "frequency": frequency,
        "mostAskedBy": most_asked_by,
    }


QUESTION_BANK = [
    _bank("Design a system to find top K frequent elements in an array",
          "Use a min heap of size K or HashMap + sorting approach",
          "HashMap approach: Count frequencies, sort by frequency, return top K elements",
          "Google", "DSA", "Medium", ["Array", "Heap", "HashMap"], 45, ["Google", "Amazon", "Facebook"]),
    _bank("Implement LRU Cache",
          "Use HashMap + Doubly Linked List for O(1) operations",
          "HashMap stores key->node mapping, LinkedList maintains order. On access, move node to end.",
          "Google", "DSA", "Hard", ["Design", "Cache", "LinkedList"], 60, ["Google", "Amazon", "Microsoft"]),
    _bank("Serialize and Deserialize Binary Tree",
          "Use level-order or pre-order traversal to serialize",
          "Pre-order: visit node, then left, then right. Use markers for null nodes.",
          "Google", "DSA", "Hard", ["Tree", "Serialization"], 35, ["Google", "Amazon"]),
    _bank("Longest Substring Without Repeating Characters",
          "Sliding window with HashMap to track characters",
          "Expand window by moving right pointer, shrink from left when duplicate found",
          "Google", "DSA", "Medium", ["String", "SlidingWindow"], 50, ["Google", "Amazon", "Apple"]),
    _bank("Two Sum Problem",
          "Use HashMap to store numbers and find complements in O(n)",
          "For each number, check if target-number exists in map, then add current number",
          "Amazon", "DSA", "Easy", ["Array", "HashMap"], 55, ["Amazon", "Google", "Facebook"]),
    _bank("Merge K Sorted Lists",
          "Use min heap or divide and conquer approach",
          "Min heap: add first node of each list, pop min, add next node from same list",
          "Amazon", "DSA", "Hard", ["LinkedList", "Heap"], 40, ["Amazon", "Google"]),
    _bank("Number of Islands (DFS/BFS)",
          "Use DFS or BFS to mark visited land cells",
          "For each unvisited '1', do DFS/BFS and mark all connected 1s as visited",
          "Amazon", "DSA", "Medium", ["Graph", "DFS", "BFS"], 48, ["Amazon", "Google", "Bloomberg"]),
    _bank("Design a URL Shortening Service (like TinyURL)",
          "Use Base62 encoding, hash table for mapping, database for persistence",
          "Map short URL to long URL using incrementing counter or hash function",
          "Google", "System Design", "Medium", ["SystemDesign", "Distributed"], 52, ["Google", "Amazon", "Microsoft"]),
    _bank("Design a Caching System (like Redis)",
          "Use LRU eviction, concurrent HashMap, and expiration policy",
          "HashMap for O(1) access, LinkedList for LRU order, timer for expiration",
          "Amazon", "System Design", "Hard", ["SystemDesign", "Cache"], 45, ["Amazon", "Google"]),
    _bank("Design a Load Balancer",
          "Distribute requests using Round Robin, Least Connections, or IP Hash",
          "Maintain server pool, health checks, and routing algorithm",
          "Microsoft", "System Design", "Hard", ["SystemDesign", "DistributedSystems"], 40, ["Microsoft", "Google", "Amazon"]),
    _bank("Design a Real-time Chat Application",
          "Use WebSockets for real-time, message queue for delivery, database for persistence",
          "WebSocket connection per user, Redis pub/sub for distribution, SQL for history",
          "Facebook", "System Design", "Hard", ["SystemDesign", "RealTime", "WebSocket"], 42, ["Facebook", "Amazon"]),
    _bank("Tell me about a time you had to work with a difficult team member",
          "Show empathy, communication, and conflict resolution skills",
          "Use STAR method: Situation, Task, Action, Result. Focus on how you resolved it professionally",
          "Google", "Behavioral", "Medium", ["Teamwork", "Communication"], 35, ["Google", "Amazon", "Microsoft"]),
    _bank("Describe a situation where you failed and what you learned",
          "Choose a real example, explain root cause, and learning outcome",
          "Show humility and growth mindset. Focus on what you learned, not excuses",
          "Amazon", "Behavioral", "Medium", ["Growth", "Learning"], 40, ["Amazon", "Microsoft"]),
    _bank("How do you handle pressure and tight deadlines?",
          "Prioritize tasks, communicate clearly, and maintain code quality",
          "Give specific example of how you managed time and delivered quality",
          "Microsoft", "Behavioral", "Easy", ["Stress", "TimeManagement"], 38, ["Microsoft", "Google"]),
    _bank("Explain Database Indexing and when to use it",
          "Index speeds up queries but slows down inserts/updates",
          "B-tree index for range queries, Hash index for equality. Trade-off between read and write",
          "Amazon", "Database", "Medium", ["Database", "SQL"], 44, ["Amazon", "Microsoft"]),
    _bank("What are ACID properties in databases?",
          "Atomicity, Consistency, Isolation, Durability",
          "Atomicity: all or nothing. Consistency: valid state. Isolation: concurrent access. Durability: persisted",
          "Microsoft", "Database", "Medium", ["Database", "Transactions"], 48, ["Microsoft", "Google"]),
    _bank("Difference between SQL and NoSQL databases",
          "SQL: structured, ACID, SQL queries. NoSQL: flexible, eventual consistency, various models",
          "SQL best for structured data, NoSQL for scalability and flexibility",
          "Google", "Database", "Medium", ["Database", "Design"], 50, ["Google", "Amazon"]),
]


def cover_letter(job_title: str, company_name: str, profile: UserProfile) -> str:
    """Markdown cover letter filled from the request and the user's profile."""
    skills = ", ".join(profile.skills[:3]) or "key industry skills"
    return f"""# Cover Letter

Dear Hiring Manager,

I am writing to express my strong interest in the {job_title} position at {company_name}. With my background in {profile.industry or "my industry"} and {profile.experience if profile.experience is not None else "several"} years of experience, I am confident in my ability to contribute to your team.

Throughout my career, I have developed expertise in {skills}. My professional background includes {profile.bio or "diverse project implementations"}, which has equipped me with a comprehensive understanding of industry best practices and innovative solutions.

I am particularly drawn to this opportunity because of my passion for {company_name}'s mission and values. I am eager to bring my skills and experience to your organization and contribute to your continued success.

Thank you for considering my application. I look forward to discussing how I can be a valuable asset to your team.

Sincerely,
{profile.name or "Candidate"}
"""


def quiz() -> dict:
    return {"questions": copy.deepcopy(QUIZ_QUESTIONS)}


def job_questions(skills: str = "") -> dict:
    return {"questions": _job_questions(skills)}


def industry_insights(industry: str | None) -> dict:
    """Insights for the industry, using Software Development tables when unknown."""
    skills = INDUSTRY_SKILLS.get(industry or "", INDUSTRY_SKILLS[DEFAULT_INDUSTRY])
    salaries = INDUSTRY_SALARIES.get(industry or "", INDUSTRY_SALARIES[DEFAULT_INDUSTRY])
    return {
        "salaryRanges": copy.deepcopy(salaries),
        "growthRate": 12,
        "demandLevel": "High",
        "topSkills": list(skills["topSkills"]),
        "marketOutlook": "Positive",
        "keyTrends": [
            f"Industry transformation in {industry or DEFAULT_INDUSTRY}",
            "Remote work and flexible arrangements expansion",
            "Continuous learning and skill development emphasis",
            "Automation and AI integration",
            "Diversity and inclusion initiatives",
        ],
        "recommendedSkills": list(skills["recommendedSkills"]),
    }


def roadmap(skills_to_learn: list[str] | tuple[str, ...]) -> dict:
    """Three-phase roadmap spreading skills two, two, then the remainder."""
    phases = []
    for template, skills in zip(ROADMAP_PHASES, ROADMAP_SKILL_SLICES):
        phase = copy.deepcopy(template)
        phase["skills"] = list(skills_to_learn[skills])
        phases.append(phase)
    return {"phases": phases}


def coding_challenges(language: str | None = None, difficulty: str | None = None) -> dict:
    """Static challenges stamped with the requested language.

    The static set has no Hard challenges, so filtering on "Hard" yields an
    empty list.
    """
    challenges = []
    for template in CODING_CHALLENGES:
        if difficulty and template["difficulty"] != difficulty:
            continue
        challenge = copy.deepcopy(template)
        challenge["language"] = language or "JavaScript"
        challenges.append(challenge)
    return {"challenges": challenges}


def filter_questions(
    questions: list[dict],
    company: str | None = None,
    category: str | None = None,
    difficulty: str | None = None,
    role: str | None = None,
    limit: int = 20,
) -> list[dict]:
    """Filter bank entries on every given field, most frequently asked first."""
    criteria = {"company": company, "category": category, "difficulty": difficulty, "role": role}
    matches = [
        q for q in questions
        if all(value is None or q.get(name) == value for name, value in criteria.items())
    ]
    matches.sort(key=lambda q: q.get("frequency", 0), reverse=True)
    return matches[: max(limit, 0)]


def question_bank(
    company: str | None = None,
    category: str | None = None,
    difficulty: str | None = None,
    role: str | None = None,
    limit: int = 20,
) -> dict:
    return {
        "questions": copy.deepcopy(
            filter_questions(QUESTION_BANK, company, category, difficulty, role, limit)
        )
    }
