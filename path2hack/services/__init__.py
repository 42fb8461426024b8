"""
Path2Hack Backend: Services Layer
==================================

What:  Business logic between routes (HTTP) and collaborators (DB, Gemini, GitHub, web).

Service Inventory:
    - LLMService (abstract): prompt in, text out
    - GeminiService:         LLMService backed by Google Gemini
    - GitHubService:         public repository listing + language tally
    - PageFetcher:           GET arbitrary project pages
    - extract_page_text():   visible text of an HTML document
    - FileService:           upload naming and storage
    - UserService:           registration (insert-if-absent on email)
    - ProjectService:        project creation (insert-if-absent on name)
    - IdeaService:           GitHub-derived and freeform idea prompts
    - ReviewService:         fetch → extract → review pipeline

Outbound clients are exposed through `get_*` dependency functions so routes
receive them via FastAPI's Depends() and tests can override them.
"""
