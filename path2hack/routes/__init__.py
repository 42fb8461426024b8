"""
Path2Hack Backend: API Routes Package
======================================

Route Inventory:
    - users.py:    POST /api/register
    - ideas.py:    POST /api/githubProjectIdea, POST /api/projectIdea
    - review.py:   POST /api/scrapeAndReviewProject
    - projects.py: POST /api/createProject
    - health.py:   GET  /health

Routes stay thin: unpack the request, call a service, shape the response.
Failures propagate as Path2HackError and are rendered by the global handlers.
"""
