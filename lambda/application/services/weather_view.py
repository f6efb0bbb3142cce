"""
Weather View Service - estado observável da tela de clima atual
Orquestra busca, "usar minha localização", refresh automático e API key
"""
import asyncio
from typing import Awaitable, Callable, List, Optional

from application.dtos.responses import ViewState
from application.ports.input.get_weather_port import IGetWeatherUseCase
from application.ports.output.geolocation_port import GeolocationOptions, IGeolocationProvider
from application.ports.output.key_value_store_port import IKeyValueStore
from domain.constants import Messages, StorageKeys, View
from domain.entities.weather_bundle import WeatherBundle
from domain.exceptions import (
    DomainException,
    GeolocationUnavailableException,
    QuotaExceededException
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

StateListener = Callable[[ViewState], None]


class WeatherView:
    """
    Estado da view + orquestração das chamadas ao provider

    Estados: idle → loading → sucesso (data, error limpo)
                            → falha (error, data inalterado)

    Cada requisição recebe um número de sequência crescente; respostas que
    não pertencem à requisição mais recente são descartadas (não alteram
    data, error nem loading).

    O refresh automático é uma task asyncio da própria instância: iniciada
    em `initialize()`/`start_auto_refresh()` e cancelada em `close()`.

    Uso:
        async with WeatherView(use_case, store, geolocation) as view:
            view.subscribe(render)
            await view.search("Bogotá")
    """

    def __init__(
        self,
        use_case: IGetWeatherUseCase,
        store: IKeyValueStore,
        geolocation: IGeolocationProvider,
        default_location: str = View.DEFAULT_LOCATION,
        refresh_interval_seconds: float = View.REFRESH_INTERVAL_SECONDS,
        geolocation_options: GeolocationOptions = GeolocationOptions()
    ):
        self.use_case = use_case
        self.store = store
        self.geolocation = geolocation
        self.default_location = default_location
        self.refresh_interval_seconds = refresh_interval_seconds
        self.geolocation_options = geolocation_options

        self.query: str = ""
        self.loading: bool = False
        self.error: Optional[str] = None
        self.data: Optional[WeatherBundle] = None
        self.api_key: str = store.get(StorageKeys.API_KEY) or ""
        self.theme: str = View.THEME_LIGHT

        self._request_seq = 0
        self._refresh_task: Optional[asyncio.Task] = None
        self._listeners: List[StateListener] = []

    async def __aenter__(self) -> 'WeatherView':
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # =============================
    # Estado observável
    # =============================

    @property
    def state(self) -> ViewState:
        return ViewState(
            query=self.query,
            loading=self.loading,
            error=self.error,
            data=self.data,
            api_key=self.api_key,
            theme=self.theme
        )

    @property
    def has_data(self) -> bool:
        return self.data is not None

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Registra listener chamado com um ViewState a cada mudança

        Returns:
            Função que remove o listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)

    # =============================
    # Ciclo de vida
    # =============================

    async def initialize(self) -> None:
        """
        Carga inicial: com API key, tenta a posição do dispositivo em
        silêncio e cai para a última localização salva (ou a padrão).
        Depois inicia o refresh automático.
        """
        if self.api_key:
            loaded = await self._load_device_position()
            if not loaded:
                location = self.store.get(StorageKeys.LAST_LOCATION) or self.default_location
                await self._get_weather(location)

        self.start_auto_refresh()

    def start_auto_refresh(self) -> None:
        """Inicia a task de refresh periódico (idempotente)"""
        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = asyncio.create_task(self._auto_refresh_loop())
            logger.info("Auto-refresh started", interval_seconds=self.refresh_interval_seconds)

    async def close(self) -> None:
        """Cancela o refresh automático"""
        task, self._refresh_task = self._refresh_task, None
        if task is None:
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Auto-refresh stopped")

    async def _auto_refresh_loop(self) -> None:
        while True:
            await asyncio.sleep(self.refresh_interval_seconds)
            if self.data is None:
                continue
            logger.debug("Auto-refresh tick")
            try:
                await self.refresh()
            except Exception:
                # Um tick com falha não encerra o loop
                logger.error("Auto-refresh tick failed", exc_info=True)

    # =============================
    # Ações do usuário
    # =============================

    def set_query(self, text: str) -> None:
        self.query = text
        self._notify()

    def toggle_theme(self) -> None:
        self.theme = View.THEME_DARK if self.theme == View.THEME_LIGHT else View.THEME_LIGHT
        self._notify()

    async def search(self, text: Optional[str] = None) -> None:
        """
        Busca pelo texto informado (ou pela query atual)
        No-op se vazio após trim.
        """
        location = (self.query if text is None else text).strip()
        if not location:
            return
        await self._get_weather(location)

    async def use_my_location(self) -> None:
        """
        Busca pela posição do dispositivo

        Sem API key: erro imediato, sem geolocalização nem request.
        Posição negada/timeout: erro de localização, data inalterado.
        """
        if not self.api_key:
            self._set_error(Messages.NO_API_KEY)
            return

        seq = self._begin_request()

        try:
            position = await self.geolocation.get_current_position(self.geolocation_options)
        except GeolocationUnavailableException as e:
            logger.warning("Could not get device position", error=e.message)
            if self._is_current(seq):
                self._set_error(Messages.NO_LOCATION)
            return

        if not self._is_current(seq):
            return

        self._persist(StorageKeys.LAST_LOCATION, str(position))
        await self._complete(
            seq,
            self.use_case.execute_by_coordinates(position.latitude, position.longitude, self.api_key)
        )

    async def refresh(self) -> None:
        """Recarrega o endereço resolvido do bundle atual (no-op sem dados)"""
        if self.data is not None and self.data.resolved_address:
            await self._get_weather(self.data.resolved_address)

    async def save_api_key(self, key: str) -> None:
        """
        Salva a API key (trim) e, se não vazia, busca a localização padrão
        """
        self.api_key = key.strip()
        if not self.api_key:
            self._notify()
            return

        self._persist(StorageKeys.API_KEY, self.api_key)
        self.error = None
        await self._get_weather(self.default_location)

    # =============================
    # Requisições
    # =============================

    async def _load_device_position(self) -> bool:
        """Carga silenciosa pela posição do dispositivo (falha não gera erro)"""
        try:
            position = await self.geolocation.get_current_position(self.geolocation_options)
        except GeolocationUnavailableException as e:
            logger.info("Device position unavailable on startup", error=e.message)
            return False

        seq = self._begin_request()
        await self._complete(
            seq,
            self.use_case.execute_by_coordinates(position.latitude, position.longitude, self.api_key)
        )
        return True

    async def _get_weather(self, location: str) -> None:
        if not self.api_key:
            self._set_error(Messages.NO_API_KEY)
            return

        seq = self._begin_request()
        await self._complete(seq, self.use_case.execute(location, self.api_key))

    def _begin_request(self) -> int:
        self._request_seq += 1
        self.loading = True
        self.error = None
        self._notify()
        return self._request_seq

    def _is_current(self, seq: int) -> bool:
        return seq == self._request_seq

    async def _complete(self, seq: int, request: Awaitable[WeatherBundle]) -> None:
        """
        Aguarda a requisição e aplica o resultado se ela ainda for a mais recente
        """
        try:
            bundle = await request
        except QuotaExceededException:
            message = Messages.QUOTA_EXCEEDED
        except DomainException as e:
            message = e.message or Messages.GENERIC
        except Exception:
            logger.error("Unexpected error in weather request", seq=seq, exc_info=True)
            message = Messages.GENERIC
        else:
            if not self._is_current(seq):
                logger.info("Discarding stale response", seq=seq, latest=self._request_seq)
                return
            self.data = bundle
            self.error = None
            self.loading = False
            self._notify()
            return

        if not self._is_current(seq):
            logger.info("Discarding stale error", seq=seq, latest=self._request_seq, error=message)
            return
        logger.warning("Weather request failed", error=message)
        self._set_error(message)

    def _persist(self, key: str, value: str) -> None:
        """Persiste no store; falha só é logada (a ação continua)"""
        try:
            saved = self.store.set(key, value)
        except OSError as e:
            logger.warning("Could not persist value", key=key, error=str(e))
            return
        if saved is False:
            logger.warning("Could not persist value", key=key)

    def _set_error(self, message: str) -> None:
        self.error = message
        self.loading = False
        self._notify()
