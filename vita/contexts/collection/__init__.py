"""
Collection Context

Responsibilities:
- Scaffolds a conforming TEMPLATE.md for the user to fill in
- Pre-fills the template from a YAML answers file when one is given

Owns: Template layout (template/profile_template.md.jinja)
Never: Parses templates or writes endpoint files
"""

from vita.contexts.collection.template_generator import ProfileTemplateGenerator, load_answers

__all__ = ["ProfileTemplateGenerator", "load_answers"]
