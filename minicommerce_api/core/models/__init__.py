"""Models shared across layers. ``io`` holds the API request and response schemas."""
