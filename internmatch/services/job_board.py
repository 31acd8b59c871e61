"""
Job Board Service

The public job board is backed by a fixed set of demonstration postings.
Filtering and pagination happen in memory.
"""

import math
from typing import List, Optional

# Demonstration postings shown on the public job board
JOB_POSTINGS = [
    {
        "id": "1",
        "title": "Software Development Intern",
        "company": "TechCorp Solutions",
        "location": "San Francisco, CA",
        "type": "paid",
        "description": (
            "Join our dynamic team and work on cutting-edge web applications using React, "
            "Node.js, and MongoDB. Gain hands-on experience with modern development practices."
        ),
        "full_description": (
            "We're looking for a passionate software development intern to join our engineering "
            "team. You'll work alongside senior developers on real projects, learning modern web "
            "development technologies including React, Node.js, MongoDB, and AWS. This is a "
            "hands-on role where you'll contribute to actual product features and learn industry "
            "best practices. Perfect for students looking to build their portfolio and gain "
            "professional experience."
        ),
        "skills": ["JavaScript", "React", "Node.js", "MongoDB", "Git"],
        "posted_date": "2024-01-15",
        "duration": "3-6 months",
        "applicants": 24,
    },
    {
        "id": "2",
        "title": "Marketing Assistant",
        "company": "Growth Marketing Agency",
        "location": "Remote",
        "type": "unpaid",
        "description": (
            "Learn digital marketing strategies, social media management, and content creation. "
            "Perfect for marketing students seeking real-world experience."
        ),
        "full_description": (
            "Join our marketing team and learn the ins and outs of digital marketing. You'll "
            "assist with social media campaigns, content creation, email marketing, and "
            "analytics. This role is perfect for marketing students who want to build a strong "
            "foundation in digital marketing and gain hands-on experience with real clients. "
            "You'll learn to use tools like Google Analytics, Mailchimp, and various social "
            "media platforms."
        ),
        "skills": [
            "Social Media Marketing",
            "Content Creation",
            "Google Analytics",
            "Email Marketing",
            "Creative Writing",
        ],
        "posted_date": "2024-01-12",
        "duration": "4-8 months",
        "applicants": 18,
    },
    {
        "id": "3",
        "title": "Data Science Intern",
        "company": "DataInsight Analytics",
        "location": "New York, NY",
        "type": "paid",
        "description": (
            "Work with large datasets, build predictive models, and create data visualizations. "
            "Learn Python, SQL, and machine learning techniques."
        ),
        "full_description": (
            "Join our data science team and work on exciting projects involving big data "
            "analysis, machine learning, and predictive modeling. You'll learn to use Python, "
            "SQL, and various data science libraries like pandas, scikit-learn, and matplotlib. "
            "This role involves working with real business data to solve actual problems and "
            "create insights that drive business decisions."
        ),
        "skills": ["Python", "SQL", "Machine Learning", "Data Visualization", "Statistics"],
        "posted_date": "2024-01-10",
        "duration": "6 months",
        "applicants": 31,
    },
    {
        "id": "4",
        "title": "UX/UI Design Intern",
        "company": "Creative Design Studio",
        "location": "Austin, TX",
        "type": "both",
        "description": (
            "Create beautiful user interfaces and improve user experiences. Work with Figma, "
            "Adobe Creative Suite, and learn design principles."
        ),
        "full_description": (
            "Join our design team and work on real projects for clients across various "
            "industries. You'll learn to create user-centered designs, conduct user research, "
            "create wireframes and prototypes, and collaborate with developers. This role will "
            "teach you the complete design process from concept to implementation using modern "
            "design tools and methodologies."
        ),
        "skills": ["Figma", "Adobe Creative Suite", "User Research", "Wireframing", "Prototyping"],
        "posted_date": "2024-01-08",
        "duration": "3-5 months",
        "applicants": 15,
    },
    {
        "id": "5",
        "title": "Business Development Intern",
        "company": "Startup Ventures",
        "location": "Boston, MA",
        "type": "unpaid",
        "description": (
            "Learn sales strategies, market research, and business development. Help identify "
            "new opportunities and build client relationships."
        ),
        "full_description": (
            "Join our business development team and learn the fundamentals of sales, market "
            "research, and strategic partnerships. You'll assist with lead generation, market "
            "analysis, client presentations, and relationship building. This role is perfect "
            "for business students who want to understand how companies grow and develop their "
            "professional network."
        ),
        "skills": ["Sales", "Market Research", "Presentation Skills", "CRM Software", "Business Strategy"],
        "posted_date": "2024-01-05",
        "duration": "4-6 months",
        "applicants": 22,
    },
    {
        "id": "6",
        "title": "Content Writing Intern",
        "company": "Digital Content Hub",
        "location": "Remote",
        "type": "both",
        "description": (
            "Write engaging content for blogs, social media, and marketing materials. Improve "
            "your writing skills and build a portfolio."
        ),
        "full_description": (
            "Join our content team and write engaging articles, social media posts, and "
            "marketing copy for various clients. You'll learn SEO best practices, content "
            "strategy, and how to write for different audiences and platforms. This role will "
            "help you build a strong writing portfolio and understand content marketing "
            "fundamentals."
        ),
        "skills": ["Content Writing", "SEO", "Social Media", "Copywriting", "Research"],
        "posted_date": "2024-01-03",
        "duration": "3-4 months",
        "applicants": 19,
    },
]

ALL_TYPES = "all"


def _matches_search(job: dict, needle: str) -> bool:
    return (
        needle in job["title"].lower()
        or needle in job["company"].lower()
        or any(needle in skill.lower() for skill in job["skills"])
    )


def filter_jobs(jobs: List[dict], search: Optional[str] = None, job_type: Optional[str] = None) -> List[dict]:
    """
    Apply the job board filters.

    search: case-insensitive substring of title, company or any skill
    job_type: exact match on the posting's type ("both" is its own type);
              None or "all" disables the filter
    """
    if search:
        needle = search.lower()
        jobs = [job for job in jobs if _matches_search(job, needle)]
    if job_type and job_type != ALL_TYPES:
        jobs = [job for job in jobs if job["type"] == job_type]
    return jobs


def paginate(items: List[dict], page: int, limit: int) -> dict:
    """Slice one page (1-based) and describe where it sits."""
    skip = (page - 1) * limit
    return {
        "items": items[skip:skip + limit],
        "pagination": {
            "total": len(items),
            "page": page,
            "limit": limit,
            "total_pages": math.ceil(len(items) / limit),
        },
    }


def list_jobs(search: Optional[str] = None, job_type: Optional[str] = None,
              page: int = 1, limit: int = 50) -> dict:
    """Filtered, paginated job board listing."""
    jobs = filter_jobs(list(JOB_POSTINGS), search=search, job_type=job_type)
    result = paginate(jobs, page, limit)
    return {"jobs": result["items"], "pagination": result["pagination"]}
