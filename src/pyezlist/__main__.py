from pyezlist.app import App
from pyezlist.ui import ListPanel


def build_app(app: App) -> ListPanel:
	"""
	Compose the UI tree: one ListPanel bound to the app's state.
	"""
	panel = ListPanel(
		id="list-panel",
		state=app.list_state,
		invoker=app.invoke,
	)
	app.add_component(panel)
	return panel


def main() -> None:
	app = App()
	build_app(app)
	app.run()


if __name__ == "__main__":
	main()
