"""Placeholder artifact rendering for simulated generation.

Produces SVG data URLs whose visuals depend on keywords in the prompt, so
simulated output stays recognizable in the UI without a provider call.

Dependencies: html, random, learnhub.core.jobs
System role: Simulated-mode renderer for image and video generation
"""

import html
import random

from learnhub.core.jobs.artifacts import to_data_url
from learnhub.core.jobs.models import GeneratedArtifact, GenerationConfig

SVG_MIME_TYPE = "image/svg+xml"
PALETTE = ("#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7", "#DDA0DD")


def _truncate(prompt: str, limit: int) -> str:
    return prompt if len(prompt) <= limit else f"{prompt[:limit]}..."


def _has_any(prompt: str, *keywords: str) -> bool:
    lowered = prompt.lower()
    return any(keyword in lowered for keyword in keywords)


def _image_visuals(prompt: str, color: str) -> str:
    if _has_any(prompt, "math", "algebra", "equation"):
        return (
            f'<text x="200" y="300" fill="{color}" font-family="Arial" font-size="24">x² + y² = z²</text>'
            f'<text x="280" y="320" fill="{color}" font-family="Arial" font-size="20">∑ ∫ π</text>'
        )
    if _has_any(prompt, "nature", "tree", "forest"):
        return (
            '<polygon points="256,280 240,320 272,320" fill="green" opacity="0.7"/>'
            '<rect x="252" y="320" width="8" height="20" fill="brown"/>'
        )
    if _has_any(prompt, "city", "building", "urban"):
        return (
            f'<rect x="200" y="290" width="30" height="40" fill="{color}" opacity="0.6"/>'
            f'<rect x="240" y="280" width="25" height="50" fill="{color}" opacity="0.7"/>'
            f'<rect x="275" y="295" width="35" height="35" fill="{color}" opacity="0.5"/>'
        )
    if _has_any(prompt, "animal", "cat", "dog"):
        return (
            f'<circle cx="240" cy="300" r="15" fill="{color}" opacity="0.6"/>'
            f'<circle cx="272" cy="300" r="15" fill="{color}" opacity="0.6"/>'
            f'<ellipse cx="256" cy="320" rx="25" ry="15" fill="{color}" opacity="0.7"/>'
        )
    return (
        f'<circle cx="220" cy="300" r="8" fill="{color}" opacity="0.6"/>'
        f'<rect x="250" y="295" width="15" height="15" rx="3" fill="{color}" opacity="0.7"/>'
        f'<polygon points="290,300 285,310 295,310" fill="{color}" opacity="0.5"/>'
    )


def _video_visuals(prompt: str, color: str) -> str:
    if _has_any(prompt, "cartoon", "animation", "animated"):
        return (
            f'<circle cx="200" cy="180" r="25" fill="{color}" opacity="0.7">'
            '<animate attributeName="cy" values="180;170;180" dur="1.5s" repeatCount="indefinite"/>'
            "</circle>"
            '<circle cx="190" cy="175" r="3" fill="white"/>'
            '<circle cx="210" cy="175" r="3" fill="white"/>'
            '<path d="M 185 185 Q 200 195 215 185" stroke="white" stroke-width="2" fill="none"/>'
            f'<rect x="400" y="160" width="20" height="20" rx="5" fill="{color}" opacity="0.6">'
            '<animate attributeName="y" values="160;140;160" dur="1s" repeatCount="indefinite"/>'
            "</rect>"
        )
    if _has_any(prompt, "nature", "landscape", "outdoor"):
        return (
            f'<polygon points="150,200 200,140 250,200" fill="{color}" opacity="0.6"/>'
            f'<polygon points="220,200 270,150 320,200" fill="{color}" opacity="0.4"/>'
            '<circle cx="500" cy="160" r="20" fill="#FFD700" opacity="0.8">'
            '<animate attributeName="opacity" values="0.8;0.5;0.8" dur="3s" repeatCount="indefinite"/>'
            "</circle>"
            '<ellipse cx="450" cy="140" rx="30" ry="15" fill="white" opacity="0.6">'
            '<animate attributeName="cx" values="450;470;450" dur="4s" repeatCount="indefinite"/>'
            "</ellipse>"
        )
    if _has_any(prompt, "tech", "digital", "cyber"):
        return (
            f'<rect x="180" y="160" width="15" height="15" fill="{color}" opacity="0.7">'
            '<animate attributeName="opacity" values="0.7;0.3;0.7" dur="0.8s" repeatCount="indefinite"/>'
            "</rect>"
            f'<rect x="220" y="180" width="12" height="12" fill="{color}" opacity="0.5">'
            '<animate attributeName="opacity" values="0.5;0.9;0.5" dur="1.2s" repeatCount="indefinite"/>'
            "</rect>"
            f'<line x1="200" y1="170" x2="250" y2="170" stroke="{color}" stroke-width="2" opacity="0.5">'
            '<animate attributeName="opacity" values="0.5;1;0.5" dur="1.5s" repeatCount="indefinite"/>'
            "</line>"
        )
    return (
        f'<circle cx="200" cy="180" r="15" fill="{color}" opacity="0.6">'
        '<animate attributeName="r" values="15;25;15" dur="2s" repeatCount="indefinite"/>'
        "</circle>"
        f'<rect x="300" y="165" width="30" height="30" rx="5" fill="{color}" opacity="0.5"/>'
        f'<polygon points="450,170 470,190 430,190" fill="{color}" opacity="0.7">'
        '<animate attributeName="opacity" values="0.7;0.3;0.7" dur="1.3s" repeatCount="indefinite"/>'
        "</polygon>"
    )


def render_image_svg(prompt: str, index: int = 0) -> str:
    """Render the SVG document for the index-th placeholder image of a prompt."""
    color = PALETTE[index % len(PALETTE)]
    text = html.escape(prompt)
    footer = html.escape(_truncate(prompt, 30))
    return (
        '<svg width="512" height="512" xmlns="http://www.w3.org/2000/svg">'
        f'<defs><linearGradient id="grad{index}" x1="0%" y1="0%" x2="100%" y2="100%">'
        f'<stop offset="0%" style="stop-color:{color};stop-opacity:1"/>'
        f'<stop offset="100%" style="stop-color:{color}aa;stop-opacity:1"/>'
        "</linearGradient></defs>"
        f'<rect width="100%" height="100%" fill="url(#grad{index})"/>'
        '<rect x="50" y="100" width="412" height="250" rx="20" fill="white" opacity="0.9"/>'
        f'<circle cx="256" cy="150" r="30" fill="{color}" opacity="0.8"/>'
        '<text x="256" y="158" text-anchor="middle" fill="white" font-family="Arial" '
        'font-size="20" font-weight="bold">AI</text>'
        '<text x="256" y="220" text-anchor="middle" fill="#333" font-family="Arial" '
        f'font-size="18" font-weight="bold">"{text}"</text>'
        '<text x="256" y="250" text-anchor="middle" fill="#666" font-family="Arial" '
        'font-size="14">Generated Image Concept</text>'
        f"{_image_visuals(prompt, color)}"
        '<text x="256" y="480" text-anchor="middle" fill="white" font-family="Arial" '
        f'font-size="12" opacity="0.8">Simulated Generation - Prompt: "{footer}"</text>'
        "</svg>"
    )


def render_video_svg(prompt: str, color: str | None = None) -> str:
    """Render an animated SVG standing in for a generated video."""
    color = color or random.choice(PALETTE)
    text = html.escape(prompt)
    footer = html.escape(_truncate(prompt, 40))
    return (
        '<svg width="640" height="360" xmlns="http://www.w3.org/2000/svg">'
        '<defs><linearGradient id="videoGrad" x1="0%" y1="0%" x2="100%" y2="100%">'
        '<stop offset="0%" style="stop-color:#1a1a1a;stop-opacity:1"/>'
        '<stop offset="100%" style="stop-color:#2d2d2d;stop-opacity:1"/>'
        "</linearGradient></defs>"
        '<rect width="100%" height="100%" fill="url(#videoGrad)"/>'
        f'<rect x="20" y="20" width="600" height="320" rx="10" fill="none" stroke="{color}" '
        'stroke-width="2" opacity="0.5"/>'
        f'<rect x="40" y="40" width="560" height="80" rx="5" fill="{color}" opacity="0.1"/>'
        '<text x="320" y="70" font-family="Arial" font-size="20" fill="#fff" '
        'text-anchor="middle" font-weight="bold">AI Generated Video</text>'
        f'<text x="320" y="100" font-family="Arial" font-size="16" fill="{color}" '
        f'text-anchor="middle">"{text}"</text>'
        f"{_video_visuals(prompt, color)}"
        f'<circle cx="320" cy="220" r="40" fill="{color}" opacity="0.8">'
        '<animate attributeName="opacity" values="0.8;0.4;0.8" dur="2s" repeatCount="indefinite"/>'
        "</circle>"
        '<polygon points="305,205 305,235 335,220" fill="white"/>'
        '<rect x="60" y="300" width="520" height="4" rx="2" fill="#333"/>'
        f'<rect x="60" y="300" width="260" height="4" rx="2" fill="{color}">'
        '<animate attributeName="width" values="0;520;0" dur="4s" repeatCount="indefinite"/>'
        "</rect>"
        '<text x="60" y="325" font-family="Arial" font-size="12" fill="#ccc">0:00</text>'
        '<text x="560" y="325" font-family="Arial" font-size="12" fill="#ccc">0:05</text>'
        '<text x="320" y="350" font-family="Arial" font-size="10" fill="#666" '
        f'text-anchor="middle">Simulated Video Generation - Prompt: "{footer}"</text>'
        "</svg>"
    )


def render_image_placeholder(
    prompt: str,
    index: int = 0,
    config: GenerationConfig | None = None,
) -> GeneratedArtifact:
    """Build a placeholder image artifact."""
    svg = render_image_svg(prompt, index)
    return GeneratedArtifact(
        url=to_data_url(svg.encode("utf-8"), SVG_MIME_TYPE),
        prompt=prompt,
        mime_type=SVG_MIME_TYPE,
        config=config or GenerationConfig(),
    )


def render_video_placeholder(
    prompt: str,
    config: GenerationConfig | None = None,
) -> GeneratedArtifact:
    """Build a placeholder video artifact. Matches the ArtifactRenderer signature."""
    svg = render_video_svg(prompt)
    return GeneratedArtifact(
        url=to_data_url(svg.encode("utf-8"), SVG_MIME_TYPE),
        prompt=prompt,
        mime_type=SVG_MIME_TYPE,
        config=config or GenerationConfig(),
    )
