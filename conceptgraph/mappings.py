# Each category gets a distinct color that reads on both dark and light backgrounds.
CATEGORY_COLORS: dict[str, str] = {
    "Methods":                    "#3b82f6",
    "Systems":                    "#8b5cf6",
    "Tools":                      "#6366f1",
    "Principles":                 "#f59e0b",
    "Techniques":                 "#10b981",
    "Frameworks":                 "#06b6d4",
    "Cognitive Biases":           "#ef4444",
    "Psychology & Mental Models": "#ec4899",
    "Philosophy & Wisdom":        "#a855f7",
    "Well-Being & Happiness":     "#22c55e",
    "Decision Science":           "#f97316",
    "Business & Economics":       "#14b8a6",
    "Leadership & Management":    "#0ea5e9",
    "Learning & Education":       "#eab308",
    "Writing & Content Creation": "#d946ef",
    "Attention & Focus":          "#f43f5e",
    "Communication":              "#84cc16",
    "Thinking":                   "#a78bfa",
    "Software Development":       "#2dd4bf",
    "Productivity":               "#fb923c",
    "AI":                         "#818cf8",
    "Journaling":                 "#fbbf24",
    "Concepts":                   "#94a3b8",
}

COLOR_FALLBACK = "#94a3b8"

# Node radius: BASE + degree * PER_EDGE, clamped to [MIN, MAX]
NODE_SIZE_BASE = 2.0
NODE_SIZE_PER_EDGE = 0.5
NODE_SIZE_MIN = 2.0
NODE_SIZE_MAX = 12.0

# Pseudo-category used by list pages; never a real concept category
ALL_CATEGORIES_LABEL = "All"
