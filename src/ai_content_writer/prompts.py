"""System prompt construction."""
from __future__ import annotations

from ai_content_writer.types.context import GenerationContext
from ai_content_writer.types.enums import ContentFormat
from ai_content_writer.types.messages import Message

DEFAULT_SYSTEM_PROMPT = """You are a professional content writer creating high-quality content for a CMS.

Rules:
1. Generate only the requested content, no explanations or metadata
2. Match the tone and style appropriate for the content type and context
3. Keep content focused and relevant to the prompt
4. Use proper grammar, spelling, and formatting
5. For HTML fields, include appropriate markup when beneficial
6. Consider SEO best practices when applicable
7. Write in a clear, engaging style appropriate for the target audience

Generate the requested content based on the following prompt:"""

_FORMAT_DIRECTIVES: dict[ContentFormat, str] = {
    ContentFormat.HTML: "Format the content as clean HTML with appropriate tags.",
    ContentFormat.MARKDOWN: "Format the content as Markdown.",
    ContentFormat.PLAIN: "Format the content as plain text.",
}


class PromptComposer:
    """Builds the system instruction for a generation call."""

    heading = "Additional context:"

    def context_instructions(self, context: GenerationContext) -> list[str]:
        """Instruction lines for the fields *context* actually carries."""
        lines: list[str] = []
        if context.entry_type_handle:
            lines.append(f"This content is for a {context.entry_type_handle} entry type.")
        if context.field_handle:
            lines.append(f"The content will be inserted into the '{context.field_handle}' field.")
        if context.format is not None:
            lines.append(_FORMAT_DIRECTIVES[ContentFormat.parse(context.format)])
        if context.existing_content:
            lines.append("Consider the existing content context when generating new content.")
        return lines

    def build_system_prompt(
        self, base_system_prompt: str, context: GenerationContext | None = None
    ) -> str:
        """Append context instructions to *base_system_prompt*.

        Returns *base_system_prompt* unchanged when the context carries
        nothing to say.
        """
        lines = self.context_instructions(context or GenerationContext())
        if not lines:
            return base_system_prompt
        return f"{base_system_prompt}\n\n{self.heading}\n" + "\n".join(lines)

    def build_messages(
        self,
        prompt: str,
        base_system_prompt: str,
        context: GenerationContext | None = None,
    ) -> tuple[Message, Message]:
        """The system/user exchange sent to the provider."""
        return (
            Message.system(self.build_system_prompt(base_system_prompt, context)),
            Message.user(prompt),
        )
