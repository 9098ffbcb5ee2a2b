"""
XML output for parsed documents.

Layout:
    <document>
      <sentence>
        <word>hello</word>
        <nonWord> </nonWord>
        <properWord>Gavrilo Princip</properWord>
      </sentence>
    </document>
"""

from typing import BinaryIO

from lxml import etree

from propername_tokenizer.models import Document, TokenKind

TOKEN_TAGS = {
    TokenKind.WORD: "word",
    TokenKind.PROPER_WORD: "properWord",
    TokenKind.NON_WORD: "nonWord",
}


def build_tree(document: Document) -> etree._Element:
    """Build the <document> element for a parsed document."""
    root = etree.Element("document")
    for sentence in document.sentences:
        sentence_el = etree.SubElement(root, "sentence")
        for token in sentence.tokens:
            token_el = etree.SubElement(sentence_el, TOKEN_TAGS[token.kind])
            token_el.text = token.text
    return root


def to_xml(document: Document, pretty_print: bool = True) -> str:
    """Serialize a document as an XML string."""
    return etree.tostring(build_tree(document), pretty_print=pretty_print, encoding="unicode")


def write_xml(document: Document, stream: BinaryIO, pretty_print: bool = True):
    """Write a document as UTF-8 XML, with declaration, to a binary stream."""
    stream.write(etree.tostring(
        build_tree(document),
        pretty_print=pretty_print,
        xml_declaration=True,
        encoding="UTF-8",
    ))
