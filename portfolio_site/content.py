"""Static page content (hero, about, skills, projects, footer).

Everything here is a plain literal so templates can iterate over it
without any lookups. Edit these lists to change what the page shows.
"""

from __future__ import annotations

from typing import Dict, List

PROFILE = {
    "name": "Atul Raj Gautam",
    "first": "Atul Raj",
    "last": "Gautam",
    "tagline": (
        "I create stellar web experiences with modern technologies. Specializing in "
        "front-end development, I build interfaces that are both beautiful and functional."
    ),
    "bio": [
        "Hello! I'm Atul Raj Gautam, a passionate full-stack developer with a love for "
        "creating innovative web solutions. My journey in web development began several "
        "years ago, and I've been constantly evolving my skills to stay at the forefront "
        "of technology.",
        "I specialize in modern web technologies including React, Node.js, and various "
        "databases. My approach to development focuses on creating user-centric "
        "applications that not only look great but also provide exceptional "
        "functionality and performance.",
        "When I'm not coding, I enjoy exploring new technologies, contributing to "
        "open-source projects, and sharing knowledge with the developer community. I "
        "believe in continuous learning and am always excited to take on new challenges.",
    ],
    "traits": ["🎯 Problem Solver", "🚀 Innovation Driven", "🌟 Quality Focused"],
    "github_url": "https://github.com",
}

# Anchors in page order; the navbar links to "#<id>".
SECTIONS: List[Dict[str, str]] = [
    {"id": "home", "label": "Home"},
    {"id": "about", "label": "About"},
    {"id": "skills", "label": "Skills"},
    {"id": "projects", "label": "Projects"},
    {"id": "contact", "label": "Contact"},
]

# Reveal-on-scroll settings per section (fraction of the element that
# must be visible, and whether the reveal happens only once).
REVEAL: Dict[str, Dict[str, object]] = {
    "about": {"amount": 0.3, "once": True},
    "skills": {"amount": 0.2, "once": True},
    "projects": {"amount": 0.2, "once": True},
    "contact": {"amount": 0.2, "once": True},
}

FEATURES = [
    {
        "icon": "code",
        "title": "Full-Stack Development",
        "description": "Proficient in both frontend and backend technologies, creating "
        "seamless end-to-end solutions.",
    },
    {
        "icon": "rocket",
        "title": "Modern Technologies",
        "description": "Always staying updated with the latest frameworks and tools to "
        "deliver cutting-edge applications.",
    },
    {
        "icon": "academic",
        "title": "Continuous Learning",
        "description": "Passionate about learning new technologies and best practices to "
        "improve development efficiency.",
    },
]

STATS = [
    {"number": "3+", "label": "Years Experience"},
    {"number": "50+", "label": "Projects Completed"},
    {"number": "20+", "label": "Technologies"},
    {"number": "100%", "label": "Client Satisfaction"},
]

SKILL_CATEGORIES = [
    {
        "title": "Frontend",
        "skills": [
            {"name": "React", "icon": "⚛️"},
            {"name": "TypeScript", "icon": "🔷"},
            {"name": "Next.js", "icon": "▲"},
            {"name": "Tailwind CSS", "icon": "🎨"},
            {"name": "HTML5", "icon": "🌐"},
            {"name": "CSS3", "icon": "🎯"},
        ],
    },
    {
        "title": "Backend",
        "skills": [
            {"name": "Node.js", "icon": "🟢"},
            {"name": "Express.js", "icon": "🚀"},
            {"name": "Python", "icon": "🐍"},
            {"name": "REST APIs", "icon": "🔗"},
            {"name": "GraphQL", "icon": "🔺"},
            {"name": "Socket.io", "icon": "⚡"},
        ],
    },
    {
        "title": "Database",
        "skills": [
            {"name": "MongoDB", "icon": "🍃"},
            {"name": "PostgreSQL", "icon": "🐘"},
            {"name": "MySQL", "icon": "🗄️"},
            {"name": "Firebase", "icon": "🔥"},
            {"name": "Redis", "icon": "📦"},
            {"name": "Prisma", "icon": "⚪"},
        ],
    },
    {
        "title": "Tools & Others",
        "skills": [
            {"name": "Git", "icon": "📝"},
            {"name": "Docker", "icon": "🐳"},
            {"name": "AWS", "icon": "☁️"},
            {"name": "Figma", "icon": "🎨"},
            {"name": "VS Code", "icon": "💻"},
            {"name": "Postman", "icon": "📮"},
        ],
    },
]

# Level is a percentage (0..100) used as the progress bar width.
COMPETENCIES = [
    {"skill": "React & Next.js", "level": 95},
    {"skill": "Node.js & Express", "level": 90},
    {"skill": "TypeScript", "level": 88},
    {"skill": "MongoDB & SQL", "level": 85},
    {"skill": "Tailwind CSS", "level": 92},
    {"skill": "AWS & DevOps", "level": 80},
]

PROJECTS = [
    {
        "title": "E-Commerce Platform",
        "description": "A full-stack e-commerce solution with React, Node.js, and MongoDB. "
        "Features include user authentication, payment integration, order management, "
        "and admin dashboard.",
        "tech": ["React", "Node.js", "MongoDB", "Stripe", "JWT"],
        "live_demo": "#",
        "github": "#",
        "featured": True,
    },
    {
        "title": "Task Management App",
        "description": "A collaborative task management application with real-time "
        "updates, drag-and-drop functionality, and team collaboration features.",
        "tech": ["Next.js", "TypeScript", "Socket.io", "PostgreSQL"],
        "live_demo": "#",
        "github": "#",
        "featured": True,
    },
    {
        "title": "Social Media Dashboard",
        "description": "Analytics dashboard for social media management with data "
        "visualization, scheduling features, and performance tracking.",
        "tech": ["React", "D3.js", "Express", "MongoDB", "Chart.js"],
        "live_demo": "#",
        "github": "#",
        "featured": False,
    },
    {
        "title": "Weather App",
        "description": "Modern weather application with location-based forecasts, "
        "interactive maps, and detailed weather analytics.",
        "tech": ["React", "OpenWeather API", "Mapbox", "CSS3"],
        "live_demo": "#",
        "github": "#",
        "featured": False,
    },
    {
        "title": "Portfolio Website",
        "description": "Responsive portfolio website with modern design, smooth "
        "animations, and optimized performance.",
        "tech": ["React", "Tailwind", "Framer Motion", "Node.js"],
        "live_demo": "#",
        "github": "#",
        "featured": False,
    },
    {
        "title": "Chat Application",
        "description": "Real-time chat application with multiple rooms, file sharing, "
        "and user presence indicators.",
        "tech": ["React", "Socket.io", "Node.js", "MongoDB"],
        "live_demo": "#",
        "github": "#",
        "featured": False,
    },
]


def featured_projects() -> List[dict]:
    """Projects shown as large cards."""
    return [p for p in PROJECTS if p["featured"]]


def other_projects() -> List[dict]:
    return [p for p in PROJECTS if not p["featured"]]
