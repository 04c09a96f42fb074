from __future__ import annotations

import logging
import threading

import customtkinter as ctk

from dashboard_client.auth import AuthService, StaticTokenProvider
from dashboard_client.config import AppSettings, ConfigurationError
from dashboard_client.http import HttpClient
from dashboard_client.logging_utils import configure_logging
from dashboard_client.models import DASHBOARD_VIEW, LOGIN_VIEW, Credentials
from dashboard_client.services import SessionDriver

logger = logging.getLogger(__name__)

ERROR_COLOR = "#d14343"


class LoginFrame(ctk.CTkFrame):
	def __init__(self, master, on_submit):
		super().__init__(master)
		self._on_submit = on_submit
		self._busy = False

		ctk.CTkLabel(
			self,
			text="Sign Into Your Account",
			font=ctk.CTkFont(size=22, weight="bold"),
		).pack(anchor="w", padx=24, pady=(24, 16))

		ctk.CTkLabel(self, text="Email Address").pack(anchor="w", padx=24, pady=(4, 2))
		self._email = ctk.CTkEntry(self, placeholder_text="me@example.com", width=360)
		self._email.pack(anchor="w", padx=24, pady=(0, 8))

		ctk.CTkLabel(self, text="Password").pack(anchor="w", padx=24, pady=(4, 2))
		self._password = ctk.CTkEntry(self, show="*", width=360)
		self._password.pack(anchor="w", padx=24, pady=(0, 8))
		self._password.bind("<Return>", lambda _event: self._submit())

		self._submit_btn = ctk.CTkButton(
			self,
			text="Login to my Dashboard",
			command=self._submit,
			width=360,
		)
		self._submit_btn.pack(anchor="w", padx=24, pady=12)

		self.error_label = ctk.CTkLabel(self, text="", text_color=ERROR_COLOR)
		self.error_label.pack(anchor="w", padx=24, pady=(0, 24))

	def _submit(self):
		# <Return> still fires while the button is disabled.
		if self._busy:
			return
		credentials = Credentials(
			identifier=self._email.get().strip(),
			secret=self._password.get(),
		)
		self._on_submit(credentials)

	def set_busy(self, busy: bool):
		self._busy = busy
		self._submit_btn.configure(state="disabled" if busy else "normal")

	def clear_password(self):
		self._password.delete(0, "end")


class DashboardFrame(ctk.CTkFrame):
	def __init__(self, master, on_logout):
		super().__init__(master)

		header = ctk.CTkFrame(self)
		header.pack(fill="x", padx=16, pady=(16, 8))

		ctk.CTkLabel(
			header,
			text="User Management Dashboard",
			font=ctk.CTkFont(size=22, weight="bold"),
		).pack(side="left", padx=12, pady=12)

		self._logout_btn = ctk.CTkButton(header, text="Logout", command=on_logout)
		self._logout_btn.pack(side="right", padx=12, pady=12)

		plan = ctk.CTkFrame(self)
		plan.pack(fill="x", padx=16, pady=8)

		ctk.CTkLabel(plan, text="Startup Plan - $100/Month").pack(anchor="w", padx=12, pady=(12, 4))
		usage_bar = ctk.CTkProgressBar(plan)
		usage_bar.pack(fill="x", padx=12, pady=4)
		usage_bar.set(0.35)
		ctk.CTkLabel(plan, text="Users: 35/100").pack(anchor="w", padx=12, pady=(4, 12))

		self.error_label = ctk.CTkLabel(self, text="", text_color=ERROR_COLOR)
		self.error_label.pack(anchor="w", padx=16, pady=(0, 16))

	def set_busy(self, busy: bool):
		self._logout_btn.configure(state="disabled" if busy else "normal")


class MainWindow(ctk.CTk):
	def __init__(self, settings: AppSettings, auth_service: AuthService):
		super().__init__()
		self.title("User Management Dashboard")
		self.geometry("720x480")
		self.minsize(560, 400)

		self._status_label = ctk.CTkLabel(self, text="Not signed in")
		self._status_label.pack(anchor="w", padx=16, pady=(16, 0))

		self._frames = {
			LOGIN_VIEW: LoginFrame(self, on_submit=self._submit_login),
			DASHBOARD_VIEW: DashboardFrame(self, on_logout=self._submit_logout),
		}
		self._route = ""
		self._driver = SessionDriver(
			auth_service,
			view=self,
			support_contact=settings.support_contact,
		)
		self._show_view(LOGIN_VIEW)

	# SessionView. The driver calls these from worker threads.
	def navigate(self, view_id: str) -> None:
		self.after(0, lambda: self._show_view(view_id))

	def show_message(self, text: str) -> None:
		self.after(0, lambda: self._current_frame().error_label.configure(text=text))

	def clear_message(self) -> None:
		self.after(0, lambda: self._current_frame().error_label.configure(text=""))

	def _current_frame(self):
		return self._frames[self._route]

	def _show_view(self, view_id: str):
		if view_id not in self._frames:
			logger.error("Unknown view %s", view_id)
			return

		for frame in self._frames.values():
			frame.pack_forget()
			frame.error_label.configure(text="")

		frame = self._frames[view_id]
		if isinstance(frame, LoginFrame):
			frame.clear_password()
		frame.pack(fill="both", expand=True, padx=16, pady=16)
		self._route = view_id
		self._refresh_status()

	def _submit_login(self, credentials: Credentials):
		self._run_in_background("Signing in...", lambda: self._driver.submit_login(credentials))

	def _submit_logout(self):
		self._run_in_background("Signing out...", self._driver.submit_logout)

	def _run_in_background(self, status_text: str, call):
		frame = self._current_frame()
		frame.set_busy(True)
		self._status_label.configure(text=status_text)

		def worker():
			try:
				call()
			except Exception as exc:
				logger.exception("Session request failed")
				text = f"{type(exc).__name__}: {exc}"
				self.after(0, lambda: self._status_label.configure(text=text))
			else:
				self.after(0, self._refresh_status)
			finally:
				self.after(0, lambda: frame.set_busy(False))

		threading.Thread(target=worker, daemon=True).start()

	def _refresh_status(self):
		self._status_label.configure(
			text="Signed in" if self._route == DASHBOARD_VIEW else "Not signed in"
		)


def build_auth_service(settings: AppSettings) -> AuthService:
	http_client = HttpClient(settings)
	return AuthService(
		settings,
		http_client,
		token_provider=StaticTokenProvider(settings.csrf_token),
	)


def run_app() -> None:
	configure_logging()
	ctk.set_appearance_mode("System")
	ctk.set_default_color_theme("blue")

	try:
		settings = AppSettings.from_env()
	except ConfigurationError as exc:
		logger.error("Configuration error: %s", exc)
		app = ctk.CTk()
		app.title("Dashboard Client - Configuration Error")
		app.geometry("760x360")
		message = ctk.CTkTextbox(app)
		message.pack(fill="both", expand=True, padx=16, pady=16)
		message.insert(
			"1.0",
			"Configuration error. Fix the environment variables and restart:\n\n"
			f"{exc}\n\n"
			"Common settings:\n"
			"- DASHBOARD_BASE_URL\n"
			"- DASHBOARD_CSRF_TOKEN\n"
			"- DASHBOARD_TIMEOUT_SECONDS\n",
		)
		app.mainloop()
		return

	configure_logging(settings.log_level)
	window = MainWindow(settings, build_auth_service(settings))
	window.mainloop()


if __name__ == "__main__":
	run_app()
