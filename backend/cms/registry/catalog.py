"""Built-in component catalog, in registry artifact format."""

BUILTIN_COMPONENTS = [
    {
        "name": "Hero",
        "slug": "hero",
        "description": "Full-width hero section with headline, subheading, CTA buttons and background image.",
        "category": "layout",
        "version": "1.0.0",
        "status": "stable",
        "tags": ["hero", "banner", "header", "cta", "landing"],
        "propSchema": [
            {"name": "headline", "type": "string", "label": "Headline", "required": True, "default": "Build Something Amazing"},
            {"name": "subheading", "type": "string", "label": "Subheading", "default": "Start your journey with a platform designed for scale."},
            {"name": "ctaLabel", "type": "string", "label": "CTA Button Label", "default": "Get Started"},
            {"name": "ctaHref", "type": "string", "label": "CTA Link", "default": "#"},
            {"name": "backgroundImage", "type": "image", "label": "Background Image"},
            {"name": "alignment", "type": "enum", "label": "Text Alignment", "options": ["left", "center", "right"], "default": "center"},
            {"name": "minHeight", "type": "enum", "label": "Minimum Height", "options": ["small", "medium", "large", "fullscreen"], "default": "large"},
        ],
        "defaultPreset": {
            "name": "Default",
            "description": "Centered hero with headline, subheading and a CTA button.",
            "props": {
                "headline": "Build Something Amazing",
                "subheading": "Start your journey with a platform designed for scale.",
                "ctaLabel": "Get Started",
                "ctaHref": "#",
                "alignment": "center",
                "minHeight": "large",
            },
        },
        "additionalPresets": [
            {
                "name": "Left Aligned",
                "description": "Hero with left-aligned text.",
                "props": {"headline": "Your Story Starts Here", "alignment": "left", "minHeight": "medium"},
            },
        ],
    },
    {
        "name": "Feature Grid",
        "slug": "feature-grid",
        "description": "Grid of features with icons, titles and descriptions.",
        "category": "content",
        "version": "1.0.0",
        "status": "stable",
        "tags": ["features", "grid", "benefits"],
        "propSchema": [
            {"name": "heading", "type": "string", "label": "Section Heading", "default": "Features"},
            {"name": "columns", "type": "enum", "label": "Columns", "options": ["2", "3", "4"], "default": "3"},
            {"name": "features", "type": "array", "label": "Features", "description": "List of {icon, title, description}."},
            {"name": "variant", "type": "enum", "label": "Style Variant", "options": ["cards", "minimal", "bordered"], "default": "cards"},
        ],
        "defaultPreset": {
            "name": "Default",
            "description": "3-column feature grid with card styling.",
            "props": {
                "heading": "Features",
                "columns": "3",
                "variant": "cards",
                "features": [
                    {"icon": "zap", "title": "Fast", "description": "Lightning-fast performance out of the box."},
                    {"icon": "shield", "title": "Secure", "description": "Enterprise-grade security built in."},
                    {"icon": "palette", "title": "Beautiful", "description": "Stunning design with zero effort."},
                ],
            },
        },
    },
    {
        "name": "Testimonials",
        "slug": "testimonials",
        "description": "Customer testimonials in a grid, carousel or stack.",
        "category": "social-proof",
        "version": "1.0.0",
        "status": "stable",
        "tags": ["testimonials", "reviews", "social-proof"],
        "propSchema": [
            {"name": "heading", "type": "string", "label": "Section Heading", "default": "What Our Customers Say"},
            {"name": "layout", "type": "enum", "label": "Layout", "options": ["grid", "carousel", "stacked"], "default": "grid"},
            {"name": "showRating", "type": "boolean", "label": "Show Star Rating", "default": True},
            {"name": "testimonials", "type": "array", "label": "Testimonials"},
        ],
        "defaultPreset": {
            "name": "Default",
            "description": "Testimonial grid with ratings.",
            "props": {"heading": "What Our Customers Say", "layout": "grid", "showRating": True, "testimonials": []},
        },
    },
    {
        "name": "FAQ",
        "slug": "faq",
        "description": "Accordion of frequently asked questions.",
        "category": "content",
        "version": "1.1.0",
        "status": "stable",
        "tags": ["faq", "accordion", "questions"],
        "propSchema": [
            {"name": "heading", "type": "string", "label": "Section Heading", "default": "Frequently Asked Questions"},
            {"name": "items", "type": "array", "label": "Questions", "default": []},
            {"name": "allowMultipleOpen", "type": "boolean", "label": "Allow Multiple Open", "default": False},
        ],
        "defaultPreset": {
            "name": "Default",
            "description": "Single-open accordion.",
            "props": {
                "heading": "Frequently Asked Questions",
                "items": [{"question": "How do I get started?", "answer": "Create a site and add a page."}],
            },
        },
    },
    {
        "name": "Gallery",
        "slug": "gallery",
        "description": "Responsive image gallery.",
        "category": "media",
        "version": "1.0.0",
        "status": "stable",
        "tags": ["gallery", "images", "media"],
        "propSchema": [
            {"name": "images", "type": "array", "label": "Images", "default": []},
            {"name": "columns", "type": "number", "label": "Columns", "min": 1, "max": 6, "default": 3},
            {"name": "gap", "type": "enum", "label": "Gap", "options": ["none", "small", "large"], "default": "small"},
        ],
        "defaultPreset": {"name": "Default", "description": "Three-column gallery.", "props": {"columns": 3}},
    },
    {
        "name": "Rich Text",
        "slug": "rich-text",
        "description": "Free-form formatted text.",
        "category": "content",
        "version": "1.0.0",
        "status": "stable",
        "tags": ["text", "content"],
        "propSchema": [
            {"name": "body", "type": "richtext", "label": "Body", "required": True, "default": ""},
            {"name": "maxWidth", "type": "enum", "label": "Max Width", "options": ["narrow", "contained", "full"], "default": "contained"},
            {"name": "textColor", "type": "color", "label": "Text Color"},
        ],
        "defaultPreset": {"name": "Default", "description": "Contained text block.", "props": {"body": "<p>Write something.</p>"}},
    },
    {
        "name": "CTA Banner",
        "slug": "cta-banner",
        "description": "Call-to-action banner with a single button.",
        "category": "utility",
        "version": "1.0.0",
        "status": "stable",
        "tags": ["cta", "banner"],
        "propSchema": [
            {"name": "text", "type": "string", "label": "Text", "required": True, "default": "Ready to get started?"},
            {"name": "buttonLabel", "type": "string", "label": "Button Label", "default": "Sign up"},
            {"name": "buttonHref", "type": "string", "label": "Button Link", "default": "#"},
            {"name": "style", "type": "object", "label": "Style Overrides", "default": {}},
        ],
        "defaultPreset": {"name": "Default", "description": "Primary banner.", "props": {"text": "Ready to get started?"}},
    },
    {
        "name": "Pricing Table",
        "slug": "pricing-table",
        "description": "Plan comparison with monthly and yearly prices.",
        "category": "commerce",
        "version": "0.9.0",
        "status": "beta",
        "tags": ["pricing", "plans"],
        "propSchema": [
            {"name": "plans", "type": "array", "label": "Plans", "default": []},
            {"name": "billingToggle", "type": "boolean", "label": "Show Billing Toggle", "default": True},
        ],
        "defaultPreset": {"name": "Default", "description": "Empty pricing table.", "props": {"plans": []}},
    },
    {
        "name": "Contact Form",
        "slug": "contact-form",
        "description": "Embedded contact form.",
        "category": "utility",
        "version": "0.1.0",
        "status": "experimental",
        "tags": ["form", "contact"],
        "propSchema": [
            {"name": "formId", "type": "string", "label": "Form", "required": True},
            {"name": "submitLabel", "type": "string", "label": "Submit Label", "default": "Send"},
        ],
        "defaultPreset": {"name": "Default", "description": "Contact form.", "props": {"submitLabel": "Send"}},
    },
    {
        "name": "Columns (legacy)",
        "slug": "legacy-columns",
        "description": "Two-column layout replaced by feature-grid.",
        "category": "layout",
        "version": "1.2.0",
        "status": "deprecated",
        "tags": ["columns", "layout"],
        "propSchema": [
            {"name": "left", "type": "richtext", "label": "Left Column"},
            {"name": "right", "type": "richtext", "label": "Right Column"},
        ],
        "defaultPreset": {"name": "Default", "description": "Empty columns.", "props": {}},
    },
]
