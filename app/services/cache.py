"""
Cache das coleções lidas do banco.

Chaves: nome da coleção (lista inteira) ou (coleção, id) para um item.
Mutação bem-sucedida invalida a coleção toda; falha não mexe no cache.

Cada coleção tem uma geração, incrementada em `invalidar`. Uma leitura que
começou antes de uma invalidação não grava o resultado (seria anterior à mutação).
"""
import threading
import time


class CacheColecoes:
    def __init__(self, ttl=300, relogio=time.monotonic):
        self.ttl = ttl
        self._relogio = relogio
        self._entradas = {}
        self._geracoes = {}
        self._epoca = 0  # incrementada por limpar()
        self._lock = threading.Lock()

    @staticmethod
    def _colecao_da_chave(chave):
        return chave[0] if isinstance(chave, tuple) else chave

    def _geracao(self, colecao):
        return self._epoca, self._geracoes.get(colecao, 0)

    def obter(self, chave, carregar):
        """
        Retorna o valor em cache ou chama `carregar()`.
        Resultado None (item inexistente) não é guardado.
        """
        colecao = self._colecao_da_chave(chave)
        agora = self._relogio()
        with self._lock:
            entrada = self._entradas.get(chave)
            if entrada and agora - entrada[0] < self.ttl:
                return entrada[1]
            geracao = self._geracao(colecao)

        valor = carregar()
        if valor is not None:
            with self._lock:
                if self._geracao(colecao) == geracao:
                    self._entradas[chave] = (self._relogio(), valor)
        return valor

    def invalidar(self, colecao):
        with self._lock:
            self._geracoes[colecao] = self._geracoes.get(colecao, 0) + 1
            for chave in [c for c in self._entradas if self._colecao_da_chave(c) == colecao]:
                del self._entradas[chave]

    def limpar(self):
        with self._lock:
            self._epoca += 1
            self._entradas.clear()

    def __contains__(self, chave):
        with self._lock:
            entrada = self._entradas.get(chave)
            return bool(entrada) and self._relogio() - entrada[0] < self.ttl
