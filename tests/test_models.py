from propername_tokenizer.models import Document, Sentence, Token, TokenKind


def make_document():
    first = Sentence((
        Token.proper_word("Gavrilo Princip"),
        Token.non_word(" "),
        Token.word("fired"),
        Token.non_word("."),
        Token.non_word(" "),
    ))
    second = Sentence((Token.word("Chaos"), Token.non_word(" "), Token.word("followed")))
    return Document((first, second))


def test_token_constructors():
    assert Token.word("hello") == Token(TokenKind.WORD, "hello")
    assert Token.proper_word("Sarajevo").kind is TokenKind.PROPER_WORD
    assert Token.non_word(",").kind is TokenKind.NON_WORD


def test_proper_word_is_a_word():
    assert Token.proper_word("Sarajevo").is_word
    assert Token.word("hello").is_word
    assert not Token.non_word(" ").is_word
    assert not Token.word("hello").is_proper_word


def test_sentence_text_rebuilds_source():
    doc = make_document()
    assert doc.sentences[0].text == "Gavrilo Princip fired. "
    assert doc.text == "Gavrilo Princip fired. Chaos followed"


def test_all_words_in_document_order():
    doc = make_document()
    assert doc.all_words_as_text() == ["Gavrilo Princip", "fired", "Chaos", "followed"]
    assert [t.kind for t in doc.all_words()][:2] == [TokenKind.PROPER_WORD, TokenKind.WORD]


def test_sentence_words_and_len():
    sentence = make_document().sentences[1]
    assert len(sentence) == 3
    assert [t.text for t in sentence.words()] == ["Chaos", "followed"]


def test_empty_document():
    doc = Document()
    assert len(doc) == 0
    assert doc.all_words() == []
    assert doc.text == ""
