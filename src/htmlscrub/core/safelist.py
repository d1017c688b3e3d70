"""Default safelist tables used when a policy does not name its own."""


# Elements kept by the default policy. Anything able to load or run active
# content (script, iframe, object, embed, form controls, ...) is left out.
ALLOWED_ELEMENTS = frozenset({
    'a', 'abbr', 'acronym', 'address', 'article', 'aside', 'audio',
    'b', 'bdi', 'bdo', 'big', 'blockquote', 'br',
    'caption', 'center', 'cite', 'code', 'col', 'colgroup',
    'data', 'dd', 'del', 'details', 'dfn', 'div', 'dl', 'dt',
    'em',
    'figcaption', 'figure', 'font', 'footer',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'header', 'hr',
    'i', 'img', 'ins',
    'kbd',
    'li',
    'main', 'mark',
    'nav',
    'ol',
    'p', 'picture', 'pre',
    'q',
    'rp', 'rt', 'ruby',
    's', 'samp', 'section', 'small', 'source', 'span', 'strike',
    'strong', 'sub', 'summary', 'sup',
    'table', 'tbody', 'td', 'tfoot', 'th', 'thead', 'time', 'tr', 'track', 'tt',
    'u', 'ul',
    'var', 'video',
    'wbr',
})

# Attributes kept by the default policy, whatever the element.
ALLOWED_ATTRIBUTES = frozenset({
    'abbr', 'align', 'alt', 'autoplay', 'axis',
    'border',
    'cellpadding', 'cellspacing', 'char', 'charoff', 'cite', 'class', 'clear',
    'color', 'cols', 'colspan', 'controls', 'coords',
    'datetime', 'dir',
    'face',
    'headers', 'height', 'href', 'hreflang', 'hspace',
    'id',
    'kind',
    'label', 'lang', 'loop',
    'media',
    'name', 'nowrap',
    'poster', 'preload',
    'rel', 'rev', 'reversed', 'rows', 'rowspan', 'rules',
    'scope', 'shape', 'size', 'span', 'src', 'srclang', 'start', 'style',
    'summary',
    'tabindex', 'target', 'title', 'type',
    'usemap',
    'valign', 'value', 'vspace',
    'width',
    'xml:lang',
})

# Attributes whose value is a URI and must pass the scheme check.
URI_ATTRIBUTES = frozenset({
    'action', 'background', 'cite', 'codebase', 'data', 'dynsrc',
    'formaction', 'href', 'icon', 'longdesc', 'lowsrc', 'manifest', 'poster',
    'profile', 'src', 'usemap', 'xlink:href', 'xml:base',
})

# SVG presentation attributes that may only reference the local document.
SVG_ATTR_VAL_ALLOWS_REF = frozenset({
    'clip-path', 'color-profile', 'cursor', 'fill', 'filter', 'marker',
    'marker-end', 'marker-mid', 'marker-start', 'mask', 'stroke',
})

# SVG elements whose xlink:href must be a local fragment reference.
SVG_ALLOW_LOCAL_HREF = frozenset({
    'altglyph', 'animate', 'animatecolor', 'animatemotion',
    'animatetransform', 'cursor', 'feimage', 'filter', 'lineargradient',
    'pattern', 'radialgradient', 'textpath', 'tref', 'set', 'use',
})

# Attributes libxml2 serializes without escaping spaces and quotes; the
# value maps to the only element it applies to (None for every element).
BROKEN_ESCAPING_ATTRIBUTES = {
    'href': None,
    'action': None,
    'src': None,
    'name': 'a',
}

ALLOWED_PROTOCOLS = frozenset({
    'afs', 'aim', 'callto', 'data', 'ed2k', 'feed', 'ftp', 'gopher', 'http',
    'https', 'irc', 'mailto', 'news', 'nntp', 'rsync', 'rtsp', 'sftp', 'ssh',
    'tag', 'tel', 'telnet', 'urn', 'webcal', 'xmpp',
})

ALLOWED_URI_DATA_MEDIATYPES = frozenset({
    'image/gif', 'image/jpeg', 'image/png', 'image/svg+xml', 'image/webp',
    'text/css', 'text/plain',
})

ALLOWED_CSS_PROPERTIES = frozenset({
    'azimuth',
    'background', 'background-color',
    'border', 'border-bottom', 'border-bottom-color', 'border-bottom-style',
    'border-bottom-width', 'border-collapse', 'border-color', 'border-left',
    'border-left-color', 'border-left-style', 'border-left-width',
    'border-radius', 'border-right', 'border-right-color',
    'border-right-style', 'border-right-width', 'border-spacing',
    'border-style', 'border-top', 'border-top-color', 'border-top-style',
    'border-top-width', 'border-width',
    'clear', 'color', 'cursor',
    'direction', 'display',
    'elevation',
    'float', 'font', 'font-family', 'font-size', 'font-style',
    'font-variant', 'font-weight',
    'height',
    'letter-spacing', 'line-height', 'list-style', 'list-style-type',
    'margin', 'margin-bottom', 'margin-left', 'margin-right', 'margin-top',
    'max-height', 'max-width', 'min-height', 'min-width',
    'overflow',
    'padding', 'padding-bottom', 'padding-left', 'padding-right',
    'padding-top',
    'pause', 'pause-after', 'pause-before', 'pitch', 'pitch-range',
    'richness',
    'speak', 'speak-header', 'speak-numeral', 'speak-punctuation',
    'speech-rate', 'stress',
    'text-align', 'text-decoration', 'text-indent', 'text-transform',
    'unicode-bidi',
    'vertical-align', 'voice-family', 'volume',
    'white-space', 'width', 'word-spacing',
    # SVG
    'fill', 'fill-opacity', 'fill-rule', 'stroke', 'stroke-linecap',
    'stroke-linejoin', 'stroke-opacity', 'stroke-width',
})

# Property families whose bare keywords are checked against
# ALLOWED_CSS_KEYWORDS.
SHORTHAND_CSS_PROPERTIES = frozenset({
    'background', 'border', 'margin', 'padding',
})

ALLOWED_CSS_KEYWORDS = frozenset({
    '!important',
    'aqua', 'auto', 'black', 'block', 'blue', 'bold', 'both', 'bottom',
    'brown', 'center', 'collapse', 'dashed', 'dotted', 'fuchsia', 'gray',
    'green', 'inherit', 'italic', 'left', 'lime', 'maroon', 'medium',
    'navy', 'none', 'normal', 'nowrap', 'olive', 'pointer', 'purple', 'red',
    'right', 'silver', 'solid', 'teal', 'thick', 'thin', 'top',
    'transparent', 'underline', 'white', 'yellow',
})

ALLOWED_CSS_FUNCTIONS = frozenset({
    'calc', 'hsl', 'hsla', 'max', 'min', 'rgb', 'rgba', 'var',
})

# Elements FullTextExtractor surrounds with line breaks in whitespace mode.
BLOCK_ELEMENTS = frozenset({
    'address', 'article', 'aside', 'blockquote', 'caption', 'center', 'dd',
    'details', 'dialog', 'div', 'dl', 'dt', 'fieldset', 'figcaption',
    'figure', 'footer', 'form', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'header',
    'hgroup', 'hr', 'li', 'main', 'nav', 'ol', 'p', 'pre', 'section',
    'summary', 'table', 'tbody', 'td', 'tfoot', 'th', 'thead', 'tr', 'ul',
})

LINE_BREAK_ELEMENTS = frozenset({'br'})
