"""
Action Set Catalog
Hand-authored suggestions offered for each detected content type.
Each content type maps to a rotation of sets; every set holds three actions
shown together in the UI. "default" is used when no other type matches.
"""

ACTION_SETS = {
    "blog post": [
        [
            {"title": "Summarize Article", "description": "Create a concise summary of the main points", "icon": "🧠"},
            {"title": "Extract Key Takeaways", "description": "List the most important insights", "icon": "🔍"},
            {"title": "Generate Tweet Thread", "description": "Turn this into an engaging Twitter thread", "icon": "🐦"},
        ],
        [
            {"title": "Rewrite Simply", "description": "Rewrite in simpler, easier language", "icon": "✍️"},
            {"title": "Create Professional Email", "description": "Transform into a professional email format", "icon": "📧"},
            {"title": "Write Pros and Cons", "description": "Analyze advantages and disadvantages", "icon": "⚖️"},
        ],
        [
            {"title": "Extract Notable Quotes", "description": "Find and highlight memorable quotes from the article", "icon": "💬"},
            {"title": "SEO Analysis", "description": "Suggest SEO improvements and keywords", "icon": "🔍"},
            {"title": "Create Quiz Questions", "description": "Generate quiz questions based on the content", "icon": "❓"},
        ],
        [
            {"title": "Infographic Outline", "description": "Create an outline for a visual infographic", "icon": "📊"},
            {"title": "Podcast Script", "description": "Transform into a podcast episode script", "icon": "🎙️"},
            {"title": "Related Articles", "description": "Suggest similar articles and topics", "icon": "🔗"},
        ],
        [
            {"title": "LinkedIn Article", "description": "Adapt for LinkedIn publishing format", "icon": "💼"},
            {"title": "Video Script", "description": "Create a YouTube video script from this content", "icon": "📹"},
            {"title": "Newsletter Content", "description": "Transform into newsletter format", "icon": "📧"},
        ],
        [
            {"title": "Academic Summary", "description": "Create an academic-style summary with citations", "icon": "🎓"},
            {"title": "Social Media Calendar", "description": "Plan social media posts from this content", "icon": "📅"},
            {"title": "Book Chapter", "description": "Expand into a book chapter format", "icon": "📚"},
        ]
    ],
    "GitHub repository": [
        [
            {"title": "Explain Project", "description": "Describe what this project does and its purpose", "icon": "🧠"},
            {"title": "Installation Guide", "description": "Create step-by-step setup instructions", "icon": "🔍"},
            {"title": "Tech Stack Summary", "description": "List technologies and frameworks used", "icon": "⚙️"},
        ],
        [
            {"title": "Generate README", "description": "Create a professional README template", "icon": "📝"},
            {"title": "Code Review Points", "description": "Suggest areas for code improvement", "icon": "💡"},
            {"title": "Learning Path", "description": "Create a study guide for this technology", "icon": "🎓"},
        ],
        [
            {"title": "API Documentation", "description": "Generate API documentation from the code", "icon": "📚"},
            {"title": "Deployment Guide", "description": "Create deployment instructions", "icon": "🚀"},
            {"title": "Contributing Guidelines", "description": "Write guidelines for contributors", "icon": "👥"},
        ],
        [
            {"title": "Security Analysis", "description": "Identify potential security considerations", "icon": "🔒"},
            {"title": "Performance Optimization", "description": "Suggest performance improvements", "icon": "⚡"},
            {"title": "Testing Strategy", "description": "Create a testing plan and examples", "icon": "🧪"},
        ],
        [
            {"title": "Architecture Overview", "description": "Explain the project architecture and design", "icon": "🏗️"},
            {"title": "Troubleshooting Guide", "description": "Create common issues and solutions", "icon": "🔧"},
            {"title": "Feature Roadmap", "description": "Suggest future features and improvements", "icon": "🗺️"},
        ],
        [
            {"title": "Portfolio Project", "description": "Create a portfolio description of this project", "icon": "💼"},
            {"title": "Interview Prep", "description": "Prepare talking points for technical interviews", "icon": "🎯"},
            {"title": "Open Source Guidelines", "description": "Create guidelines for open source contribution", "icon": "🌟"},
        ]
    ],
    "product page": [
        [
            {"title": "Feature Summary", "description": "List key features and benefits", "icon": "🧠"},
            {"title": "Comparison Points", "description": "Create comparison criteria for similar products", "icon": "⚖️"},
            {"title": "Sales Email", "description": "Write a professional sales email", "icon": "📧"},
        ],
        [
            {"title": "Review Template", "description": "Create a product review template", "icon": "📝"},
            {"title": "FAQ Generator", "description": "Generate common questions about this product", "icon": "❓"},
            {"title": "LinkedIn Post", "description": "Create a LinkedIn post about this product", "icon": "💼"},
        ],
        [
            {"title": "Pricing Analysis", "description": "Analyze pricing strategy and value proposition", "icon": "💰"},
            {"title": "Target Audience", "description": "Identify and describe the target market", "icon": "🎯"},
            {"title": "Marketing Copy", "description": "Create compelling marketing copy", "icon": "📢"},
        ],
        [
            {"title": "Competitive Analysis", "description": "Compare with competitors and alternatives", "icon": "🔍"},
            {"title": "Use Case Scenarios", "description": "Create specific use case examples", "icon": "💡"},
            {"title": "Implementation Guide", "description": "Write a guide for implementing this product", "icon": "📋"},
        ],
        [
            {"title": "ROI Calculator", "description": "Create an ROI calculation template", "icon": "📊"},
            {"title": "Social Media Campaign", "description": "Design a social media campaign", "icon": "📱"},
            {"title": "Customer Success Story", "description": "Write a customer success story template", "icon": "👥"},
        ],
        [
            {"title": "Technical Specifications", "description": "Extract and organize technical details", "icon": "⚙️"},
            {"title": "Integration Guide", "description": "Create integration instructions", "icon": "🔗"},
            {"title": "Support Documentation", "description": "Generate support and troubleshooting docs", "icon": "🛠️"},
        ]
    ],
    "YouTube video": [
        [
            {"title": "Video Summary", "description": "Create a concise summary of the video content", "icon": "📹"},
            {"title": "Key Points", "description": "Extract the main points and takeaways", "icon": "🔍"},
            {"title": "Deep Analysis", "description": "Provide detailed analysis and insights", "icon": "🧠"},
        ],
        [
            {"title": "Discussion Questions", "description": "Generate questions for further discussion", "icon": "❓"},
            {"title": "Related Topics", "description": "Suggest related topics and videos", "icon": "🔗"},
            {"title": "Social Media Post", "description": "Create engaging social media content", "icon": "📱"},
        ],
        [
            {"title": "Study Notes", "description": "Create structured study notes from the video", "icon": "📝"},
            {"title": "Action Plan", "description": "Extract actionable steps from the content", "icon": "✅"},
            {"title": "Timeline Breakdown", "description": "Break down the video into timeline segments", "icon": "⏰"},
        ],
        [
            {"title": "Expert Commentary", "description": "Add expert insights and commentary", "icon": "🎯"},
            {"title": "Controversy Analysis", "description": "Identify and analyze controversial points", "icon": "⚖️"},
            {"title": "Future Implications", "description": "Discuss future implications and trends", "icon": "🔮"},
        ],
        [
            {"title": "Educational Quiz", "description": "Create quiz questions based on the video", "icon": "🎓"},
            {"title": "Research Topics", "description": "Suggest topics for further research", "icon": "🔬"},
            {"title": "Debate Points", "description": "Generate debate topics from the content", "icon": "💭"},
        ],
        [
            {"title": "Content Repurposing", "description": "Suggest ways to repurpose this content", "icon": "♻️"},
            {"title": "Audience Analysis", "description": "Analyze the target audience and appeal", "icon": "👥"},
            {"title": "Production Notes", "description": "Create notes for video production", "icon": "🎬"},
        ]
    ],
    "YouTube sitcom": [
        [
            {"title": "Episode Summary", "description": "Create a summary of the sitcom episode", "icon": "📺"},
            {"title": "Character Analysis", "description": "Analyze the characters and their interactions", "icon": "👥"},
            {"title": "Humor Analysis", "description": "Break down the comedy elements and jokes", "icon": "😄"},
        ],
        [
            {"title": "Plot Discussion", "description": "Discuss the storyline and plot points", "icon": "📖"},
            {"title": "Cultural References", "description": "Identify and explain cultural references", "icon": "🌍"},
            {"title": "Fan Theories", "description": "Generate interesting fan theories", "icon": "💭"},
        ],
        [
            {"title": "Comedy Writing Tips", "description": "Extract comedy writing techniques used", "icon": "✍️"},
            {"title": "Character Development", "description": "Analyze character growth and arcs", "icon": "📈"},
            {"title": "Social Commentary", "description": "Identify social issues and commentary", "icon": "🗣️"},
        ],
        [
            {"title": "Behind the Scenes", "description": "Speculate on production and filming details", "icon": "🎬"},
            {"title": "Memorable Quotes", "description": "Extract and analyze memorable lines", "icon": "💬"},
            {"title": "Episode Ranking", "description": "Rate this episode within the series", "icon": "⭐"},
        ],
        [
            {"title": "Crossover Ideas", "description": "Suggest crossover scenarios with other shows", "icon": "🔄"},
            {"title": "Spin-off Concepts", "description": "Generate spin-off show ideas", "icon": "🎭"},
            {"title": "Audience Reactions", "description": "Predict and analyze audience responses", "icon": "👂"},
        ],
        [
            {"title": "Comedy Analysis", "description": "Break down different types of humor used", "icon": "😂"},
            {"title": "Season Context", "description": "Place episode in broader season context", "icon": "📅"},
            {"title": "Cultural Impact", "description": "Analyze the show's cultural significance", "icon": "🌟"},
        ]
    ],
    "YouTube movie": [
        [
            {"title": "Movie Summary", "description": "Create a comprehensive movie summary", "icon": "🎬"},
            {"title": "Character Analysis", "description": "Analyze the main characters and their arcs", "icon": "👥"},
            {"title": "Plot Analysis", "description": "Break down the storyline and plot twists", "icon": "📖"},
        ],
        [
            {"title": "Themes & Messages", "description": "Identify the main themes and messages", "icon": "💡"},
            {"title": "Cinematography Review", "description": "Analyze the visual elements and direction", "icon": "🎥"},
            {"title": "Recommendation", "description": "Create a movie recommendation with reasons", "icon": "⭐"},
        ],
        [
            {"title": "Soundtrack Analysis", "description": "Analyze the music and sound design", "icon": "🎵"},
            {"title": "Historical Context", "description": "Provide historical and cultural context", "icon": "📚"},
            {"title": "Director's Style", "description": "Analyze the director's filmmaking style", "icon": "🎭"},
        ],
        [
            {"title": "Genre Analysis", "description": "Examine how it fits within its genre", "icon": "🏷️"},
            {"title": "Symbolism & Motifs", "description": "Identify symbolic elements and recurring motifs", "icon": "🔍"},
            {"title": "Critical Reception", "description": "Analyze reviews and critical response", "icon": "📰"},
        ],
        [
            {"title": "Box Office Analysis", "description": "Discuss commercial performance and impact", "icon": "💰"},
            {"title": "Awards Potential", "description": "Evaluate awards and recognition potential", "icon": "🏆"},
            {"title": "Sequel Possibilities", "description": "Discuss potential sequels or spin-offs", "icon": "🔄"},
        ],
        [
            {"title": "Fan Theories", "description": "Generate interesting fan theories", "icon": "💭"},
            {"title": "Behind the Scenes", "description": "Speculate on production challenges", "icon": "🎬"},
            {"title": "Cultural Impact", "description": "Analyze the movie's cultural influence", "icon": "🌟"},
        ]
    ],
    "documentation": [
        [
            {"title": "Quick Start Guide", "description": "Create a simplified getting started guide", "icon": "🚀"},
            {"title": "Key Concepts", "description": "Extract and explain the main concepts", "icon": "🧠"},
            {"title": "Common Use Cases", "description": "List typical usage scenarios", "icon": "💡"},
        ],
        [
            {"title": "Troubleshooting Guide", "description": "Create a troubleshooting section", "icon": "🔧"},
            {"title": "Best Practices", "description": "Extract recommended practices", "icon": "⭐"},
            {"title": "Learning Path", "description": "Create a structured learning sequence", "icon": "🎓"},
        ],
        [
            {"title": "API Reference", "description": "Generate API documentation structure", "icon": "📚"},
            {"title": "Code Examples", "description": "Create practical code examples", "icon": "💻"},
            {"title": "Configuration Guide", "description": "Write configuration instructions", "icon": "⚙️"},
        ],
        [
            {"title": "Security Guidelines", "description": "Extract security considerations", "icon": "🔒"},
            {"title": "Performance Tips", "description": "Create performance optimization guide", "icon": "⚡"},
            {"title": "Migration Guide", "description": "Write upgrade and migration instructions", "icon": "🔄"},
        ],
        [
            {"title": "Integration Examples", "description": "Create integration tutorials", "icon": "🔗"},
            {"title": "Testing Guide", "description": "Write testing procedures and examples", "icon": "🧪"},
            {"title": "Deployment Guide", "description": "Create deployment instructions", "icon": "🚀"},
        ],
        [
            {"title": "FAQ Generator", "description": "Generate frequently asked questions", "icon": "❓"},
            {"title": "Glossary", "description": "Create a glossary of technical terms", "icon": "📖"},
            {"title": "Video Tutorial Script", "description": "Create a script for video tutorials", "icon": "📹"},
        ]
    ],
    "news article": [
        [
            {"title": "News Summary", "description": "Create a concise news summary", "icon": "📰"},
            {"title": "Key Facts", "description": "Extract the most important facts", "icon": "🔍"},
            {"title": "Background Context", "description": "Provide background information", "icon": "📚"},
        ],
        [
            {"title": "Analysis", "description": "Provide analysis and implications", "icon": "🧠"},
            {"title": "Related Stories", "description": "Suggest related news topics", "icon": "🔗"},
            {"title": "Social Media Post", "description": "Create shareable social media content", "icon": "📱"},
        ],
        [
            {"title": "Timeline of Events", "description": "Create a chronological timeline", "icon": "⏰"},
            {"title": "Stakeholder Analysis", "description": "Identify key stakeholders and their positions", "icon": "👥"},
            {"title": "Impact Assessment", "description": "Analyze potential impacts and consequences", "icon": "📊"},
        ],
        [
            {"title": "Expert Commentary", "description": "Add expert insights and analysis", "icon": "🎯"},
            {"title": "Public Opinion", "description": "Analyze public reaction and sentiment", "icon": "🗣️"},
            {"title": "Future Predictions", "description": "Make predictions about future developments", "icon": "🔮"},
        ],
        [
            {"title": "Fact-Checking Points", "description": "Identify claims that need verification", "icon": "✅"},
            {"title": "Bias Analysis", "description": "Analyze potential bias in reporting", "icon": "⚖️"},
            {"title": "International Perspective", "description": "Provide international context and views", "icon": "🌍"},
        ],
        [
            {"title": "Policy Implications", "description": "Analyze policy and regulatory implications", "icon": "📋"},
            {"title": "Economic Impact", "description": "Assess economic consequences", "icon": "💰"},
            {"title": "Historical Context", "description": "Provide historical background and parallels", "icon": "📚"},
        ]
    ],
    "portfolio": [
        [
            {"title": "Portfolio Summary", "description": "Create a professional summary", "icon": "📋"},
            {"title": "Skills Analysis", "description": "Extract and categorize skills", "icon": "⚙️"},
            {"title": "Project Highlights", "description": "Identify standout projects", "icon": "⭐"},
        ],
        [
            {"title": "Professional Bio", "description": "Create a compelling bio", "icon": "👤"},
            {"title": "Recommendations", "description": "Suggest improvements", "icon": "💡"},
            {"title": "LinkedIn Profile", "description": "Create LinkedIn profile content", "icon": "💼"},
        ],
        [
            {"title": "Resume Content", "description": "Extract content for resume sections", "icon": "📄"},
            {"title": "Cover Letter", "description": "Create a cover letter template", "icon": "✉️"},
            {"title": "Interview Talking Points", "description": "Prepare key talking points for interviews", "icon": "🎯"},
        ],
        [
            {"title": "Project Case Studies", "description": "Create detailed case studies", "icon": "📊"},
            {"title": "Technical Skills Assessment", "description": "Evaluate technical proficiency levels", "icon": "🔧"},
            {"title": "Career Path Analysis", "description": "Suggest career development opportunities", "icon": "🗺️"},
        ],
        [
            {"title": "Networking Introduction", "description": "Create networking elevator pitch", "icon": "🤝"},
            {"title": "Freelance Profile", "description": "Optimize for freelance platforms", "icon": "💼"},
            {"title": "Personal Brand Statement", "description": "Create a personal brand statement", "icon": "🌟"},
        ],
        [
            {"title": "Achievement Timeline", "description": "Create a timeline of achievements", "icon": "📅"},
            {"title": "Skill Gap Analysis", "description": "Identify areas for skill development", "icon": "📈"},
            {"title": "Portfolio Website Content", "description": "Generate content for portfolio website", "icon": "🌐"},
        ]
    ],
    "forum post": [
        [
            {"title": "Question Analysis", "description": "Analyze the main question or issue", "icon": "❓"},
            {"title": "Solution Summary", "description": "Summarize the best solutions", "icon": "✅"},
            {"title": "Key Insights", "description": "Extract valuable insights", "icon": "💡"},
        ],
        [
            {"title": "Follow-up Questions", "description": "Generate follow-up questions", "icon": "🔍"},
            {"title": "Related Topics", "description": "Suggest related discussions", "icon": "🔗"},
            {"title": "Knowledge Base", "description": "Create documentation from the discussion", "icon": "📚"},
        ],
        [
            {"title": "Expert Response", "description": "Create an expert-level response", "icon": "🎯"},
            {"title": "Step-by-Step Guide", "description": "Create a detailed step-by-step solution", "icon": "📋"},
            {"title": "Common Mistakes", "description": "Identify common mistakes to avoid", "icon": "⚠️"},
        ],
        [
            {"title": "Alternative Solutions", "description": "Suggest alternative approaches", "icon": "🔄"},
            {"title": "Resource Compilation", "description": "Compile helpful resources and links", "icon": "📚"},
            {"title": "Community Guidelines", "description": "Create community discussion guidelines", "icon": "👥"},
        ],
        [
            {"title": "Troubleshooting Flowchart", "description": "Create a troubleshooting decision tree", "icon": "🔄"},
            {"title": "Best Practices Summary", "description": "Extract best practices from the discussion", "icon": "⭐"},
            {"title": "Future Discussion Topics", "description": "Suggest topics for future discussions", "icon": "🔮"},
        ],
        [
            {"title": "Moderation Guidelines", "description": "Create moderation guidelines for similar posts", "icon": "🛡️"},
            {"title": "FAQ Entry", "description": "Create an FAQ entry from this discussion", "icon": "❓"},
            {"title": "Success Metrics", "description": "Define how to measure solution success", "icon": "📊"},
        ]
    ],
    "movie review": [
        [
            {"title": "Review Summary", "description": "Create a concise review summary", "icon": "📝"},
            {"title": "Rating Analysis", "description": "Analyze the rating and scoring", "icon": "⭐"},
            {"title": "Key Points", "description": "Extract the main review points", "icon": "🔍"},
        ],
        [
            {"title": "Recommendation", "description": "Create a recommendation based on the review", "icon": "👍"},
            {"title": "Comparison", "description": "Compare with similar movies", "icon": "⚖️"},
            {"title": "Trailer Analysis", "description": "Analyze the movie trailer", "icon": "🎬"},
        ],
        [
            {"title": "Audience Analysis", "description": "Analyze target audience and appeal", "icon": "👥"},
            {"title": "Box Office Prediction", "description": "Predict commercial performance", "icon": "💰"},
            {"title": "Awards Potential", "description": "Evaluate awards season potential", "icon": "🏆"},
        ],
        [
            {"title": "Director's Track Record", "description": "Analyze director's previous work", "icon": "🎭"},
            {"title": "Genre Expectations", "description": "Evaluate how it meets genre expectations", "icon": "🏷️"},
            {"title": "Cultural Significance", "description": "Analyze cultural impact and relevance", "icon": "🌟"},
        ],
        [
            {"title": "Technical Analysis", "description": "Analyze technical aspects (sound, visuals)", "icon": "🎥"},
            {"title": "Script Analysis", "description": "Evaluate writing and dialogue quality", "icon": "📜"},
            {"title": "Marketing Strategy", "description": "Analyze marketing and promotional approach", "icon": "📢"},
        ],
        [
            {"title": "Fan Reaction Prediction", "description": "Predict fan and audience reactions", "icon": "👂"},
            {"title": "Sequel Potential", "description": "Evaluate potential for sequels or franchises", "icon": "🔄"},
            {"title": "Historical Context", "description": "Place in context of film history", "icon": "📚"},
        ]
    ],
    "default": [
        [
            {"title": "Summarize Content", "description": "Create a concise summary", "icon": "🧠"},
            {"title": "Key Points", "description": "Extract the most important points", "icon": "🔍"},
            {"title": "Generate Questions", "description": "Create thoughtful questions based on content", "icon": "❓"},
        ],
        [
            {"title": "Rewrite Clearly", "description": "Rewrite in clearer, simpler language", "icon": "✍️"},
            {"title": "Professional Summary", "description": "Create a professional summary", "icon": "💼"},
            {"title": "Action Items", "description": "Extract actionable items or next steps", "icon": "⚙️"},
        ],
        [
            {"title": "Content Analysis", "description": "Provide detailed content analysis", "icon": "📊"},
            {"title": "Related Topics", "description": "Suggest related topics and resources", "icon": "🔗"},
            {"title": "Social Media Content", "description": "Create social media posts from this content", "icon": "📱"},
        ],
        [
            {"title": "Educational Content", "description": "Transform into educational material", "icon": "🎓"},
            {"title": "Business Application", "description": "Apply content to business context", "icon": "💼"},
            {"title": "Creative Adaptation", "description": "Suggest creative ways to use this content", "icon": "🎨"},
        ],
        [
            {"title": "Research Topics", "description": "Generate research topics from content", "icon": "🔬"},
            {"title": "Discussion Points", "description": "Create discussion topics and questions", "icon": "💭"},
            {"title": "Future Implications", "description": "Analyze future implications and trends", "icon": "🔮"},
        ],
        [
            {"title": "Content Repurposing", "description": "Suggest ways to repurpose this content", "icon": "♻️"},
            {"title": "Audience Analysis", "description": "Analyze target audience and appeal", "icon": "👥"},
            {"title": "Quality Assessment", "description": "Evaluate content quality and credibility", "icon": "⭐"},
        ]
    ]
}

CONTENT_TYPES = [name for name in ACTION_SETS if name != "default"]

# Ordered substring rules applied when a classified type is not an exact key
CONTENT_TYPE_RULES = [
    (("github",), "GitHub repository"),
    (("blog", "article"), "blog post"),
    (("product",), "product page"),
    (("youtube", "video"), "YouTube video"),
    (("doc", "manual"), "documentation"),
    (("news",), "news article"),
    (("portfolio",), "portfolio"),
    (("forum", "discussion"), "forum post"),
    (("movie review", "review"), "movie review"),
]

# Fallback suggestions for the prompt-style endpoints (/analyze-url)
URL_ONLY_ACTIONS = [
    {
        "title": "Analyze URL Structure",
        "description": "Analyze the URL structure and domain to understand the content type",
        "prompt": "Based on the URL structure and domain, what type of content is this likely to be?"
    },
    {
        "title": "Generate General Actions",
        "description": "Suggest common actions that could be useful for any web content",
        "prompt": "What are some general useful actions someone might want to perform with web content?"
    },
    {
        "title": "Extract Key Information",
        "description": "Try to extract any available information from the URL itself",
        "prompt": "What information can we extract from this URL structure and domain?"
    },
]

THIN_CONTENT_ACTIONS = [
    {
        "title": "URL Analysis",
        "description": "Analyze the URL structure and domain information",
        "prompt": "Analyze this URL and explain what type of content it likely contains"
    },
    {
        "title": "Domain Research",
        "description": "Research the domain and suggest potential content types",
        "prompt": "What can we learn about this domain and what content it might contain?"
    },
    {
        "title": "General Web Actions",
        "description": "Suggest common actions for web content",
        "prompt": "What are some useful actions someone might want to perform with web content?"
    },
]

PROMPT_FALLBACK_ACTIONS = {
    "github": [
        {
            "title": "Analyze Repository",
            "description": "Understand what this GitHub repository does and its purpose",
            "prompt": "Analyze this GitHub repository and explain its purpose and functionality"
        },
        {
            "title": "Review Code Quality",
            "description": "Assess the code quality and suggest improvements",
            "prompt": "Review the code quality of this repository and suggest improvements"
        },
        {
            "title": "Create Documentation",
            "description": "Generate comprehensive documentation for this project",
            "prompt": "Create detailed documentation for this GitHub repository"
        },
    ],
    "article": [
        {
            "title": "Summarize Content",
            "description": "Create a concise summary of the main points",
            "prompt": "Summarize the key points and main takeaways from this content"
        },
        {
            "title": "Extract Insights",
            "description": "Identify the most important insights and lessons",
            "prompt": "What are the key insights and lessons from this content?"
        },
        {
            "title": "Generate Discussion Points",
            "description": "Create discussion points for further conversation",
            "prompt": "What are some interesting discussion points from this content?"
        },
    ],
    "default": [
        {
            "title": "Analyze Content",
            "description": "Get a detailed analysis of the page content and key insights",
            "prompt": "Analyze this content and provide key insights"
        },
        {
            "title": "Summarize Information",
            "description": "Create a concise summary of the main points and takeaways",
            "prompt": "Summarize the key information from this content"
        },
        {
            "title": "Generate Action Items",
            "description": "Extract actionable items and next steps from the content",
            "prompt": "What are the main action items from this content?"
        },
    ],
}
