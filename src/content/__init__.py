# Content: posts collection and everything computed from it
"""
Content modules:
- collection: load MDX posts and query them (featured, latest, by tag...)
- related: related-posts scorer
- search: text search, suggestions and the static search index
- pagination: page slicing and page-number windows
- features: quiz grading, share links, table of contents
"""
