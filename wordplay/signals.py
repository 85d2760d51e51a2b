from blinker import signal


class Signals:

    word_admitted = signal('word_admitted', doc='called when a dictionary word is stored in the index')
    index_built   = signal('index_built',   doc='called with bucket sizes once the dictionary is read')
    word_matched  = signal('word_matched',  doc='called for every word that can be spelled with the tokens')

signals = Signals()
